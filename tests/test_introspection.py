"""
Tests for verb discovery.
"""

from apiendpoint.config import EndpointConfig
from apiendpoint.endpoint import Endpoint, Request, Response
from apiendpoint.endpoint.introspection import get_operation, iter_operations, list_verbs


WHITELIST = frozenset(["GET", "POST", "OPTIONS"])


class Plain:
    def post(self):
        return {}

    def get(self):
        return {}

    def change_response(self):
        pass


class Child(Plain):
    def delete(self):
        return {}

    def get(self):
        return {"child": True}

    @staticmethod
    def options():
        return {}

    @property
    def put(self):
        return None


def test_iter_operations_declaration_order():
    """Test that methods are listed subclass first, in declaration order."""
    names = [name for name, _ in iter_operations(Child)]

    assert names == ["delete", "get", "options", "post", "change_response"]


def test_iter_operations_most_derived_wins():
    """Test that an overridden method is reported once, from the subclass."""
    operations = dict(iter_operations(Child))

    assert operations["get"](Child()) == {"child": True}


def test_list_verbs_filters_whitelist():
    """Test that only whitelisted verbs are returned."""
    assert list_verbs(Plain(), WHITELIST) == ["POST", "GET"]


def test_list_verbs_skips_properties():
    """Test that non-method attributes are never verbs."""
    assert "PUT" not in list_verbs(Child(), frozenset(["PUT"]))


def test_list_verbs_empty():
    """Test that a handler without verbs yields an empty list."""
    assert list_verbs(object(), WHITELIST) == []
    assert list_verbs(Plain(), frozenset()) == []


def test_list_verbs_is_case_sensitive_after_uppercasing():
    """Test that lower-case whitelist entries never match."""
    assert list_verbs(Plain(), frozenset(["get", "post"])) == []


def test_list_verbs_endpoint_includes_inherited_options():
    """Test that the base class OPTIONS handler is discovered."""
    class Blog(Endpoint):
        def get(self):
            return {}

        def change_response(self):
            self.response = None

    endpoint = Blog(Request(), Response(), EndpointConfig(valid_http_verbs=WHITELIST))

    assert list_verbs(endpoint, WHITELIST) == ["GET", "OPTIONS"]


def test_get_operation():
    """Test looking up the method implementing a verb."""
    assert get_operation(Child, "GET") is Child.get
    assert get_operation(Child, "PATCH") is None


def test_non_method_attribute_hides_base_verb():
    """Test that a subclass attribute shadowing a base verb disables it."""
    class Disabled(Plain):
        post = None

    assert list_verbs(Disabled(), WHITELIST) == ["GET"]
    assert get_operation(Disabled, "POST") is None
    assert "post" not in dict(iter_operations(Disabled))
