from __future__ import annotations

from electrohub_sdk.derivation import ListingFilters


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, max(1, total_pages)))


def next_page(filters: ListingFilters, total_pages: int) -> ListingFilters:
    filters.page = clamp_page(filters.page + 1, total_pages)
    return filters


def prev_page(filters: ListingFilters) -> ListingFilters:
    filters.page = max(1, filters.page - 1)
    return filters


def goto_page(filters: ListingFilters, page: int, total_pages: int) -> ListingFilters:
    filters.page = clamp_page(page, total_pages)
    return filters


def page_numbers(total_pages: int) -> list[int]:
    return list(range(1, total_pages + 1))
