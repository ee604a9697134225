from dataclasses import dataclass


@dataclass
class SiteSetting:
    """A single key/value pair of site configuration (e.g. ``site.title``)."""

    key: str
    value: str | None = None
