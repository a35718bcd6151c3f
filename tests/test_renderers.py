# tests/test_renderers.py

"""Tests for the TypeScript and JSDoc renderings"""

# Third party imports
import pytest

# Local imports
from jsonforge.emitter import emit
from jsonforge.emitter import generate_javascript_types
from jsonforge.emitter import generate_typescript_interface
from jsonforge.exceptions import RootNotObjectError
from jsonforge.exceptions import UnsupportedLanguageError


class TestTypeScriptRendering:
    """Static interface rendering"""

    def test_user_interface(self):
        out = emit({"name": "John", "age": 30, "active": True}, "User")
        assert out == (
            "export interface User {\n"
            "  name: string;\n"
            "  age: number;\n"
            "  active: boolean;\n"
            "}"
        )

    def test_without_export(self):
        out = emit({"id": 1}, "Row", export_public=False)
        assert out == "interface Row {\n  id: number;\n}"

    def test_primitive_and_array_tokens(self):
        data = {
            "nothing": None,
            "empty": [],
            "tags": ["a", "b"],
            "matrix": [[1, 2]],
            "flags": [True],
            "blanks": [None],
        }
        out = emit(data, "T")
        assert "  nothing: null;\n" in out
        assert "  empty: any[];\n" in out
        assert "  tags: string[];\n" in out
        assert "  matrix: number[][];\n" in out
        assert "  flags: boolean[];\n" in out
        assert "  blanks: null[];\n" in out

    def test_array_of_objects_reference(self):
        out = emit({"team": [{"name": "A"}]}, "Company")
        assert out == (
            "export interface CompanyTeamItem {\n"
            "  name: string;\n"
            "}\n\n"
            "export interface Company {\n"
            "  team: CompanyTeamItem[];\n"
            "}"
        )

    def test_objects_inside_nested_arrays_are_not_named(self):
        out = emit({"grid": [[{"x": 1}]]}, "Root")
        assert out == "export interface Root {\n  grid: object[][];\n}"

    def test_company_document(self, company_data):
        assert emit(company_data, "Company") == (
            "export interface CompanyCompanyContactPhone {\n"
            "  mobile: string;\n"
            "  office: string;\n"
            "}\n\n"
            "export interface CompanyCompanyContact {\n"
            "  email: string;\n"
            "  phone: CompanyCompanyContactPhone;\n"
            "}\n\n"
            "export interface CompanyCompanyAddressCoordinates {\n"
            "  lat: number;\n"
            "  lng: number;\n"
            "}\n\n"
            "export interface CompanyCompanyAddress {\n"
            "  street: string;\n"
            "  city: string;\n"
            "  coordinates: CompanyCompanyAddressCoordinates;\n"
            "}\n\n"
            "export interface CompanyCompany {\n"
            "  name: string;\n"
            "  address: CompanyCompanyAddress;\n"
            "  contact: CompanyCompanyContact;\n"
            "}\n\n"
            "export interface Company {\n"
            "  company: CompanyCompany;\n"
            "}"
        )

    def test_untyped_sentinel_is_configurable(self):
        out = emit({"x": object(), "list": []}, "T", untyped="unknown")
        assert "  x: unknown;\n" in out
        assert "  list: unknown[];\n" in out

    def test_empty_object_root(self):
        assert emit({}, "Empty") == "export interface Empty {\n}"


class TestJSDocRendering:
    """Documentation-comment rendering"""

    def test_api_response_document(self, api_response_data):
        out = emit(api_response_data, "ApiResponse", language="javascript")
        assert out == (
            "/**\n"
            " * @typedef {Object} ApiResponseDataPagination\n"
            " * @property {number} page\n"
            " * @property {number} perPage\n"
            " * @property {number} total\n"
            " */\n\n"
            "module.exports = {};\n\n"
            "/**\n"
            " * @typedef {Object} ApiResponseDataItemsItemAttributes\n"
            " * @property {string} color\n"
            " * @property {string} size\n"
            " */\n\n"
            "module.exports = {};\n\n"
            "/**\n"
            " * @typedef {Object} ApiResponseDataItemsItem\n"
            " * @property {string} id\n"
            " * @property {string} name\n"
            " * @property {number} price\n"
            " * @property {ApiResponseDataItemsItemAttributes} attributes\n"
            " */\n\n"
            "module.exports = {};\n\n"
            "/**\n"
            " * @typedef {Object} ApiResponseData\n"
            " * @property {Array<ApiResponseDataItemsItem>} items\n"
            " * @property {ApiResponseDataPagination} pagination\n"
            " */\n\n"
            "module.exports = {};\n\n"
            "/**\n"
            " * @typedef {Object} ApiResponse\n"
            " * @property {string} status\n"
            " * @property {ApiResponseData} data\n"
            " * @property {Array} errors\n"
            " */\n\n"
            "module.exports = {};\n"
        )

    def test_without_export_has_no_placeholder(self):
        out = emit({"id": 1}, "Row", export_public=False, language="javascript")
        assert out == "/**\n * @typedef {Object} Row\n * @property {number} id\n */\n\n"

    def test_array_tokens(self):
        out = emit(
            {"tags": ["a"], "matrix": [[1]], "grid": [[{"x": 1}]], "x": None},
            "T",
            language="javascript",
        )
        assert " * @property {Array<string>} tags\n" in out
        assert " * @property {Array<Array<number>>} matrix\n" in out
        assert " * @property {Array<Array<Object>>} grid\n" in out
        assert " * @property {null} x\n" in out

    def test_unknown_uses_sentinel(self):
        out = emit({"x": object()}, "T", language="javascript", untyped="*")
        assert " * @property {*} x\n" in out


class TestEmitContract:
    """Language selection and caller contract"""

    def test_language_aliases(self):
        data = {"a": 1}
        assert emit(data, "A", language="static-typed") == emit(data, "A")
        assert emit(data, "A", language="doc-comment") == emit(data, "A", language="javascript")

    def test_unsupported_language(self):
        with pytest.raises(UnsupportedLanguageError, match="python"):
            emit({"a": 1}, "A", language="python")

    def test_non_object_root(self):
        with pytest.raises(RootNotObjectError, match="list"):
            emit([{"a": 1}], "A")

    def test_wrappers_match_emit(self, company_data):
        assert generate_typescript_interface(company_data, "C") == emit(company_data, "C")
        assert generate_javascript_types(company_data, "C", False) == emit(
            company_data, "C", False, language="javascript"
        )

    def test_renderings_share_declaration_order(self, company_data):
        ts = emit(company_data, "Company")
        js = emit(company_data, "Company", language="javascript")
        ts_names = [line.split()[2] for line in ts.splitlines() if "interface" in line]
        js_names = [line.split()[-1] for line in js.splitlines() if "@typedef" in line]
        assert ts_names == js_names
