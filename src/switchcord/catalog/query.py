"""Query expressions for the IGDB games endpoint."""

SEARCH_FIELDS = ("id", "name", "category", "platforms", "slug")


def build_search_query(
    search_term: str,
    *,
    platform_id: int = 130,
    category: int = 0,
    limit: int = 10,
) -> str:
    """
    Build a search query restricted to one platform and category.

    The term is copied verbatim between double quotes. Quotes inside the
    term are not escaped because the service does not document an escape
    rule, so such a term can break the query.

    Example:
        >>> build_search_query("zelda")
        'fields id,name,category,platforms,slug; where platforms = (130) & category = 0; search "zelda"; limit 10;'
    """
    return (
        f"fields {','.join(SEARCH_FIELDS)}; "
        f"where platforms = ({platform_id}) & category = {category}; "
        f'search "{search_term}"; '
        f"limit {limit};"
    )
