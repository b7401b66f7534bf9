import logging
from collections import defaultdict
from contextlib import contextmanager

from django.apps import apps
from django.core.exceptions import FieldDoesNotExist
from django.db import DEFAULT_DB_ALIAS, DatabaseError, IntegrityError, transaction
from django.db.models import ProtectedError, RestrictedError

from medrep.utils.exceptions import (
    ConflictError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

COLLECTIONS = {
    "visits": "visits.Visit",
    "facility_visits": "visits.FacilityVisit",
    "order_lines": "visits.OrderLine",
    "facility_order_lines": "visits.FacilityOrderLine",
    "doctors": "catalog.Doctor",
    "facilities": "catalog.Facility",
    "medicines": "catalog.Medicine",
    "user_accounts": "users.User",
}

# never handed out unless a caller asks for them by name
HIDDEN_FIELDS = {
    "user_accounts": {"password"},
}


@contextmanager
def _translate_errors(collection):
    try:
        yield
    except (IntegrityError, ProtectedError, RestrictedError) as e:
        message = f"The change to {collection} conflicts with existing records."
        raise ConflictError(message, collection=collection) from e
    except DatabaseError as e:
        logger.exception("Store call on %s failed", collection)
        raise StoreUnavailableError("The data store is unavailable.", collection=collection) from e


class EntityStore:
    """Collection oriented access to the database.

    Records go in and come out as plain dicts keyed by column name, foreign
    keys by their ``<name>_id`` attribute. Every call is a single round trip
    (joins add one more per joined relation) and reports its own outcome:
    missing records raise :class:`NotFoundError`, a failed ``expected``
    check raises :class:`ConflictError`.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def query(self, collection, filters=None, joins=None, order_by=None, fields=None) -> list[dict]:
        model = self._get_model(collection)
        fields = list(fields) if fields else self._default_fields(collection, model)
        if joins and "id" not in fields:
            fields.append("id")
        with _translate_errors(collection):
            queryset = self._manager(model).filter(**(filters or {})).order_by(*(order_by or ["pk"]))
            records = list(queryset.values(*fields))
            for join in joins or []:
                self._attach(model, records, join)
        return records

    def get(self, collection, pk, joins=None) -> dict:
        records = self.query(collection, filters={"pk": pk}, joins=joins)
        if not records:
            raise NotFoundError(f"No record {pk} in {collection}.", collection=collection, pk=pk)
        return records[0]

    def insert(self, collection, record) -> dict:
        model = self._get_model(collection)
        with _translate_errors(collection), transaction.atomic(using=self.using):
            instance = self._manager(model).create(**record)
        logger.debug("Inserted %s into %s", instance.pk, collection)
        return self.get(collection, instance.pk)

    def update(self, collection, pk, changes, expected=None) -> dict:
        """Apply ``changes`` to one record, only if it still matches ``expected``."""
        model = self._get_model(collection)
        with _translate_errors(collection), transaction.atomic(using=self.using):
            updated = self._manager(model).filter(pk=pk, **(expected or {})).update(**changes)
            if not updated:
                self._raise_missed(model, collection, pk, expected)
        logger.debug("Updated %s in %s: %s", pk, collection, changes)
        return self.get(collection, pk)

    def delete(self, collection, pk, expected=None) -> None:
        model = self._get_model(collection)
        with _translate_errors(collection), transaction.atomic(using=self.using):
            deleted, _ = self._manager(model).filter(pk=pk, **(expected or {})).delete()
            if not deleted:
                self._raise_missed(model, collection, pk, expected)
        logger.debug("Deleted %s from %s", pk, collection)

    def count(self, collection, filters=None) -> int:
        model = self._get_model(collection)
        with _translate_errors(collection):
            return self._manager(model).filter(**(filters or {})).count()

    def _get_model(self, collection):
        try:
            return apps.get_model(COLLECTIONS[collection])
        except KeyError:
            raise ValidationError(f"Unknown collection: {collection}", collection=collection)

    def _manager(self, model):
        return model._default_manager.using(self.using)

    def _default_fields(self, collection, model):
        hidden = HIDDEN_FIELDS.get(collection, set())
        return [field.attname for field in model._meta.concrete_fields if field.name not in hidden]

    def _attach(self, model, records, join):
        try:
            relation = model._meta.get_field(join)
        except FieldDoesNotExist:
            raise ValidationError(f"{model._meta.label} has no relation named {join}.", join=join)
        if not relation.one_to_many:
            raise ValidationError(f"{join} is not a one-to-many relation.", join=join)

        parent_key = relation.field.attname
        grouped = defaultdict(list)
        parent_ids = [record["id"] for record in records]
        if parent_ids:
            children = self._manager(relation.related_model).filter(**{f"{parent_key}__in": parent_ids})
            for child in children.order_by("pk").values():
                grouped[child[parent_key]].append(child)
        for record in records:
            record[join] = grouped[record["id"]]

    def _raise_missed(self, model, collection, pk, expected):
        if expected and self._manager(model).filter(pk=pk).exists():
            raise ConflictError(
                f"Record {pk} in {collection} was changed by someone else.",
                collection=collection,
                pk=pk,
                expected=expected,
            )
        raise NotFoundError(f"No record {pk} in {collection}.", collection=collection, pk=pk)


default_store = EntityStore()


def get_store(store=None) -> EntityStore:
    return store or default_store
