"""
Paginator options.

``PaginatorOptions`` gathers the knobs an :class:`EntityRepository` uses
when it builds pagers and applies operator criteria.  Instances are
immutable; ``with_*`` helpers return modified copies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from .operators import BetweenSource


@dataclass(frozen=True)
class PaginatorOptions:
    """
    Immutable pager configuration.

    Attributes:
        max_per_page: Default page size of new pagers.
        fetch_join_collection: Page over distinct root keys first so that
            joined collections do not break LIMIT/OFFSET.
        use_output_walkers: Count by wrapping the whole statement in a
            subquery instead of rewriting its select list.  Off by default:
            the wrapped count is much slower on join-heavy queries.
        allow_out_of_range_pages: Accept a current page past the last one.
        normalize_out_of_range_pages: Clamp such a page to the last one.
        max_nb_pages: Upper bound on the reported number of pages.
        between_source: Where BETWEEN reads its bounds in the
            parallel-sequence convention.
    """

    max_per_page: int = 10
    fetch_join_collection: bool = True
    use_output_walkers: bool = False
    allow_out_of_range_pages: bool = False
    normalize_out_of_range_pages: bool = False
    max_nb_pages: int | None = None
    between_source: BetweenSource = BetweenSource.LEADING

    def with_page_size(self, max_per_page: int) -> PaginatorOptions:
        return replace(self, max_per_page=max_per_page)

    def with_out_of_range(
        self,
        *,
        allow: bool | None = None,
        normalize: bool | None = None,
    ) -> PaginatorOptions:
        """Return a copy with updated out-of-range page handling."""
        return replace(
            self,
            allow_out_of_range_pages=(
                self.allow_out_of_range_pages if allow is None else allow
            ),
            normalize_out_of_range_pages=(
                self.normalize_out_of_range_pages if normalize is None else normalize
            ),
        )

    def with_between_source(self, source: BetweenSource) -> PaginatorOptions:
        return replace(self, between_source=source)
