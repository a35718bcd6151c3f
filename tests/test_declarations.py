# tests/test_declarations.py

"""Tests for the shared declaration tree builder"""

# Third party imports
import pytest

# Local imports
from jsonforge.declarations import build_declaration
from jsonforge.declarations import capitalize
from jsonforge.declarations import item_type_name
from jsonforge.declarations import nested_type_name
from jsonforge.exceptions import RootNotObjectError
from jsonforge.exceptions import UnknownValueError
from jsonforge.inference import Kind


class TestNaming:
    """Names are derived from the path from the root"""

    def test_capitalize(self):
        assert capitalize("address") == "Address"
        assert capitalize("perPage") == "PerPage"
        assert capitalize("x") == "X"
        assert capitalize("") == ""
        assert capitalize("_id") == "_id"

    def test_nested_and_item_names(self):
        assert nested_type_name("Company", "address") == "CompanyAddress"
        assert item_type_name("Company", "team") == "CompanyTeamItem"


class TestBuildDeclaration:
    """Tree shape, field order and child synthesis"""

    def test_fields_keep_insertion_order(self):
        decl = build_declaration({"c": 1, "a": "x", "b": True}, "Root")
        assert [f.name for f in decl.fields] == ["c", "a", "b"]
        assert decl.children == []

    def test_nested_object_gets_named_child(self):
        decl = build_declaration({"address": {"city": "NYC"}}, "Company")
        (field,) = decl.fields
        assert field.type_ref.kind == Kind.OBJECT
        assert field.type_ref.type_name == "CompanyAddress"
        (child,) = decl.children
        assert child.name == "CompanyAddress"
        assert [f.name for f in child.fields] == ["city"]

    def test_array_of_objects_uses_representative_element(self):
        decl = build_declaration({"items": [{"x": 1}, {"y": 2}]}, "Root")
        assert decl.fields[0].type_ref.type_name == "RootItemsItem"
        (child,) = decl.children
        assert child.name == "RootItemsItem"
        assert [f.name for f in child.fields] == ["x"]

    def test_identical_shapes_are_not_interned(self):
        decl = build_declaration({"home": {"city": "A"}, "work": {"city": "B"}}, "P")
        assert [c.name for c in decl.children] == ["PHome", "PWork"]

    def test_walk_orders_nested_before_parent(self):
        decl = build_declaration({"a": {"b": {"c": 1}}}, "Root")
        assert [d.name for d in decl.walk()] == ["RootAB", "RootA", "Root"]

    def test_walk_emits_later_fields_first(self, company_data):
        decl = build_declaration(company_data, "Company")
        assert [d.name for d in decl.walk()] == [
            "CompanyCompanyContactPhone",
            "CompanyCompanyContact",
            "CompanyCompanyAddressCoordinates",
            "CompanyCompanyAddress",
            "CompanyCompany",
            "Company",
        ]
        assert decl.count() == 6

    def test_empty_object_field(self):
        decl = build_declaration({"meta": {}}, "Root")
        assert decl.children[0].name == "RootMeta"
        assert decl.children[0].fields == []

    @pytest.mark.parametrize("root", [[{"a": 1}], "text", 3, None])
    def test_non_object_root_is_rejected(self, root):
        with pytest.raises(RootNotObjectError):
            build_declaration(root, "Root")


class TestStrictMode:
    """Strict mode refuses values that cannot be typed"""

    def test_unknown_value_allowed_by_default(self):
        decl = build_declaration({"when": object()}, "Root")
        assert decl.fields[0].type_ref.kind == Kind.UNKNOWN

    def test_unknown_value_rejected_with_path(self):
        with pytest.raises(UnknownValueError, match=r"Root\.meta\.when"):
            build_declaration({"meta": {"when": object()}}, "Root", strict=True)

    def test_unknown_inside_primitive_array(self):
        with pytest.raises(UnknownValueError, match=r"Root\.tags\[0\]"):
            build_declaration({"tags": [object()]}, "Root", strict=True)

    def test_unknown_inside_representative_item(self):
        with pytest.raises(UnknownValueError, match=r"Root\.rows\[0\]\.v"):
            build_declaration({"rows": [{"v": object()}]}, "Root", strict=True)

    def test_unknown_inside_objects_of_nested_arrays(self):
        """Objects inside arrays of arrays get no named type but are still checked"""
        with pytest.raises(UnknownValueError, match=r"Root\.grid\[0\]\[0\]\.a"):
            build_declaration({"grid": [[{"a": {1}}]]}, "Root", strict=True)

    def test_deep_unknown_inside_nested_array_objects(self):
        with pytest.raises(UnknownValueError, match=r"Root\.grid\[0\]\[0\]\.meta\.when"):
            build_declaration({"grid": [[{"meta": {"when": object()}}]]}, "Root", strict=True)

    def test_known_values_in_nested_arrays_pass(self):
        decl = build_declaration({"grid": [[{"a": 1, "b": [None]}]]}, "Root", strict=True)
        assert decl.fields[0].type_ref.kind == Kind.ARRAY_OF_PRIMITIVE
        assert decl.children == []
