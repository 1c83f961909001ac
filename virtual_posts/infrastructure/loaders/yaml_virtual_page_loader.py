"""Virtual page loader — reads virtual page definitions from a YAML file.

Executed once at application startup via the FastAPI lifespan.

File format:
    virtual_pages:
      - slug: about
        flags:
          is_page: true
          is_singular: true
        posts:
          - post_title: About us
            post_name: about
            post_content: "<p>Hello.</p>"
"""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

import yaml
from pydantic import ValidationError

from virtual_posts.application.schemas import VirtualPageDefinition, VirtualPagesDocument
from virtual_posts.application.services import VirtualPageRegistry, VirtualPosts
from virtual_posts.domain.entities import SiteContext
from virtual_posts.domain.exceptions import (
    InvalidQueryFlagError,
    UnknownQueryFlagError,
    VirtualPageDefinitionError,
)

logger = logging.getLogger(__name__)


class YamlVirtualPageLoader:
    """Builds one ``VirtualPosts`` per page declared in a YAML file."""

    def __init__(
        self,
        path: str | Path,
        site: SiteContext,
        now: Callable[[], datetime] | None = None,
    ):
        self._path = Path(path)
        self._site = site
        self._now = now

    def load(self) -> list[VirtualPageDefinition]:
        """Parse and validate the file. A missing file yields no pages."""
        if not self._path.exists():
            logger.warning("Virtual pages file not found: %s", self._path)
            return []

        try:
            raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise VirtualPageDefinitionError(str(self._path), f"invalid YAML: {exc}") from exc

        if raw is None:
            return []

        try:
            document = VirtualPagesDocument.model_validate(raw)
        except ValidationError as exc:
            raise VirtualPageDefinitionError(str(self._path), str(exc)) from exc
        return document.virtual_pages

    def load_into(self, registry: VirtualPageRegistry) -> int:
        """Register every page of the file. Returns the number of pages registered."""
        definitions = self.load()
        for definition in definitions:
            registry.register(definition.slug, self._build(definition))
        logger.info("Loaded %d virtual page(s) from %s", len(definitions), self._path)
        return len(definitions)

    def _build(self, definition: VirtualPageDefinition) -> VirtualPosts:
        try:
            return VirtualPosts(
                definition.posts,
                definition.flags,
                site=self._site,
                now=self._now,
            )
        except (UnknownQueryFlagError, InvalidQueryFlagError) as exc:
            raise VirtualPageDefinitionError(
                str(self._path), f"page '{definition.slug}': {exc}"
            ) from exc
