import pytest

from graphql_fields_list.tests.helper import parse_into_resolveinfo


@pytest.fixture
def resolve_info():
    """
    Factory building a resolve info for the root field of a query
    """
    return parse_into_resolveinfo
