"""Tests for response validation."""
import pytest
from pydantic import ValidationError
from core.models.answer import AnswerResponse, FileLink, RelatedItem, Table
from core.services.normalization.response_validator import ResponseValidator


class TestResponseValidator:
    """Test cases for ResponseValidator."""

    @pytest.fixture
    def validator(self):
        return ResponseValidator()

    def test_answer_only(self, validator):
        response = validator.validate({"answer": "hello"})
        assert response == AnswerResponse(answer="hello")

    @pytest.mark.parametrize("answer", [None, 5, ["a"], {"x": 1}])
    def test_non_string_answer_becomes_empty(self, validator, answer):
        """Test the answer is always a string."""
        assert validator.validate({"answer": answer}).answer == ""

    def test_non_mapping_candidate(self, validator):
        assert validator.validate("not a mapping") == AnswerResponse()

    def test_related_content_filtered_in_order(self, validator):
        """Test invalid related entries are dropped and the rest keep their order."""
        response = validator.validate({
            "answer": "a",
            "related_content": [
                {"title": "One", "url": "https://one"},
                {"title": "No url"},
                "junk",
                {"title": "Two", "url": "https://two", "image": "https://two.png"},
                {"title": "", "url": "https://empty-title"},
            ],
        })
        assert response.related_content == (
            RelatedItem(title="One", url="https://one"),
            RelatedItem(title="Two", url="https://two", image="https://two.png"),
        )

    def test_empty_image_dropped(self, validator):
        response = validator.validate({"related_content": [{"title": "T", "url": "u", "image": ""}]})
        assert response.related_content[0].image is None

    def test_file_links_filtered(self, validator):
        response = validator.validate({
            "file_links": [{"title": "Guide", "url": "https://guide"}, {"url": "https://no-title"}, None],
        })
        assert response.file_links == (FileLink(title="Guide", url="https://guide"),)

    def test_recommendations_keep_strings(self, validator):
        response = validator.validate({"recommendations": ["a?", 3, None, "b?"]})
        assert response.recommendations == ("a?", "b?")

    def test_non_list_field_omitted(self, validator):
        """Test a field that is not a list is omitted rather than rejected."""
        response = validator.validate({"answer": "a", "tables": {"title": "T"}, "recommendations": "x"})
        assert response.tables is None
        assert response.recommendations is None

    def test_empty_list_kept(self, validator):
        assert validator.validate({"file_links": []}).file_links == ()

    def test_tables_validated(self, validator):
        """Test tables need a string title and list headers and rows."""
        response = validator.validate({
            "tables": [
                {"title": "Pricing", "headers": ["Plan", "Price"], "rows": [["Basic", "$10"]]},
                {"title": "No headers", "rows": []},
                {"headers": [], "rows": []},
                {"title": "Bad rows", "headers": [], "rows": "x"},
            ],
        })
        assert [table.title for table in response.tables] == ["Pricing"]
        assert response.tables[0].rows == (("Basic", "$10"),)

    def test_table_cells_coerced_to_text(self, validator):
        """Test numbers, booleans and nulls in cells become text."""
        response = validator.validate({
            "tables": [{"title": "T", "headers": ["n", 2], "rows": [[1, 1.5, None, True, "x"]]}],
        })
        table = response.tables[0]
        assert table.headers == ("n", "2")
        assert table.rows == (("1", "1.5", "", "true", "x"),)

    def test_table_rows_of_differing_length(self, validator):
        """Test short and long rows are kept as they are."""
        response = validator.validate({
            "tables": [{"title": "T", "headers": ["a", "b", "c"], "rows": [["1"], ["1", "2", "3", "4"]]}],
        })
        assert response.tables[0].rows == (("1",), ("1", "2", "3", "4"))

    def test_malformed_rows_dropped(self, validator):
        response = validator.validate({
            "tables": [{"title": "T", "headers": [], "rows": [["ok"], "bad", None]}],
        })
        assert response.tables[0].rows == (("ok",),)


class TestAnswerResponseImmutability:
    """Test cases for the read-only canonical response."""

    @pytest.fixture
    def response(self):
        return ResponseValidator().validate({
            "answer": "a",
            "recommendations": ["q?"],
            "tables": [{"title": "T", "headers": ["h"], "rows": [["1"]]}],
        })

    def test_collections_cannot_grow(self, response):
        """Test list-valued fields come back as tuples with no append."""
        with pytest.raises(AttributeError):
            response.tables.append(Table(title="Extra"))
        with pytest.raises(AttributeError):
            response.recommendations.append("more?")
        with pytest.raises(AttributeError):
            response.tables[0].rows[0].append("2")

    def test_fields_cannot_be_reassigned(self, response):
        with pytest.raises(ValidationError):
            response.answer = "changed"
        with pytest.raises(ValidationError):
            response.tables[0].headers = ("x",)

    def test_json_dump_uses_lists(self, response):
        data = response.model_dump(mode="json")
        assert data["tables"] == [{"title": "T", "headers": ["h"], "rows": [["1"]]}]
        assert data["recommendations"] == ["q?"]
