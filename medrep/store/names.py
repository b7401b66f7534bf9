import logging
import warnings

from medrep.utils.exceptions import PartialResolutionWarning

logger = logging.getLogger(__name__)


def lookup_names(store, collection, ids, field="name"):
    """One batched read mapping each id to its display name."""
    ids = {pk for pk in ids if pk is not None}
    if not ids:
        return {}
    records = store.query(collection, filters={"pk__in": sorted(ids)}, fields=["id", field])
    return {record["id"]: record[field] for record in records}


def resolve_name(names, pk, fallback, *, collection, warn=True):
    """Look ``pk`` up in a map built by :func:`lookup_names`.

    A record that exists but has no name quietly gets ``fallback``. A record
    that could not be found also gets ``fallback`` but is reported through a
    :class:`PartialResolutionWarning` so the caller can keep going.
    """
    if pk in names:
        return names[pk] or fallback
    if warn and pk is not None:
        message = f"Could not resolve a name for {collection} {pk}"
        logger.warning(message)
        warnings.warn(message, PartialResolutionWarning, stacklevel=2)
    return fallback
