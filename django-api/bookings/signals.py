"""Django signals for catalog cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from bookings.models import Branch, Car, CarModel
from bookings.stores.django_store import branch_cache_key, car_cache_key


@receiver([post_save, post_delete], sender=Car)
def invalidate_car_cache(sender, instance, **kwargs):
    """Invalidate pricing info when a car is saved or deleted."""
    cache.delete(car_cache_key(instance.pk))


@receiver([post_save, post_delete], sender=CarModel)
def invalidate_car_model_cache(sender, instance, **kwargs):
    """Invalidate pricing info of every car of a model when its price changes."""
    car_ids = Car.objects.filter(car_model_id=instance.pk).values_list("pk", flat=True)
    cache.delete_many([car_cache_key(car_id) for car_id in car_ids])


@receiver([post_save, post_delete], sender=Branch)
def invalidate_branch_cache(sender, instance, **kwargs):
    """Invalidate branch coordinates when a branch is saved or deleted."""
    cache.delete(branch_cache_key(instance.pk))
