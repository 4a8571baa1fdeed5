from collections.abc import Mapping, MutableMapping

FIELDS_PARAM = "fields"
DISCRIMINATOR_FIELD = "type"


def ensure_fields_param(query: MutableMapping[str, str]) -> None:
    """Makes sure a restricted field selection still returns the hit type.

    Without ``fields`` the service returns its default field set, which
    already includes ``type``.
    """
    if fields := query.get(FIELDS_PARAM):
        if DISCRIMINATOR_FIELD not in fields.split(","):
            query[FIELDS_PARAM] = f"{fields},{DISCRIMINATOR_FIELD}"


def build_query(query: Mapping[str, str] | None, app_name: str | None = None) -> dict[str, str]:
    params = dict(query or {})
    ensure_fields_param(params)
    if app_name:
        params["client"] = app_name
    return params
