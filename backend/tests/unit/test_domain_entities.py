"""Unit tests for the domain entities."""

from app.domain.entities import ShipmentMethod


def test_new_entity_is_active_with_generated_id():
    method = ShipmentMethod(name="Express", price_per_kilometer=2.5)
    other = ShipmentMethod(name="Express", price_per_kilometer=2.5)
    assert method.id and method.id != other.id
    assert method.is_deleted is False


def test_mark_deleted_flags_and_touches():
    method = ShipmentMethod(name="Express", price_per_kilometer=2.5)
    before = method.updated_at
    method.mark_deleted()
    assert method.is_deleted is True
    assert method.updated_at >= before


def test_update_replaces_all_fields():
    method = ShipmentMethod(name="Express", price_per_kilometer=2.5, description="Fast")
    method.update(name="Rocket", description=None, price_per_kilometer=9.0)
    assert (method.name, method.description, method.price_per_kilometer) == ("Rocket", None, 9.0)
