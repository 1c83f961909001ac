"""Site context — the host information virtual posts are derived from."""

from dataclasses import dataclass
from datetime import tzinfo


@dataclass(frozen=True)
class SiteContext:
    """Home URL and local timezone of the site serving the posts."""

    home_url: str
    timezone: tzinfo

    def home_url_for(self, path: str = "") -> str:
        """Return the home URL with ``path`` appended.

        An empty path yields the bare home URL, without a trailing slash.
        """
        url = self.home_url.rstrip("/")
        if path:
            url += "/" + path.lstrip("/")
        return url
