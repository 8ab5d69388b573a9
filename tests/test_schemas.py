"""Comment payload decoding."""

import pytest
from marshmallow import ValidationError

from commentbox.models import Comment, CommentType
from commentbox.schemas.comment import CommentSchema


@pytest.fixture
def schema():
    return CommentSchema()


class TestCommentSchema:
    def test_valid_payload_builds_comment(self, schema):
        comment = schema.load({"text": "Unclear", "quote": "a quoted line", "type": "DontUnderstand"})
        assert comment == Comment(text="Unclear", quote="a quoted line", type=CommentType.DontUnderstand)

    @pytest.mark.parametrize("name", ["DontUnderstand", "NotCorrect", "Great", "Other"])
    def test_every_category_accepted(self, schema, name):
        comment = schema.load({"text": "t", "quote": "q", "type": name})
        assert comment.type.value == name

    def test_empty_quote_allowed(self, schema):
        assert schema.load({"text": "t", "quote": "", "type": "Great"}).quote == ""

    def test_empty_text_rejected(self, schema):
        with pytest.raises(ValidationError) as excinfo:
            schema.load({"text": "", "quote": "q", "type": "Great"})
        assert "text" in excinfo.value.messages

    @pytest.mark.parametrize("missing", ["text", "quote", "type"])
    def test_missing_field_rejected(self, schema, missing):
        payload = {"text": "t", "quote": "q", "type": "Other"}
        del payload[missing]
        with pytest.raises(ValidationError) as excinfo:
            schema.load(payload)
        assert missing in excinfo.value.messages

    def test_unknown_category_rejected(self, schema):
        # Known to the frontend but not accepted by the server.
        with pytest.raises(ValidationError) as excinfo:
            schema.load({"text": "t", "quote": "q", "type": "OmitsImportantPoint"})
        assert "type" in excinfo.value.messages

    def test_non_string_text_rejected(self, schema):
        with pytest.raises(ValidationError):
            schema.load({"text": 42, "quote": "q", "type": "Other"})

    def test_extra_keys_ignored(self, schema):
        comment = schema.load({"text": "t", "quote": "q", "type": "Other", "page": "/intro"})
        assert comment.text == "t"

    def test_comment_is_immutable(self, schema):
        comment = schema.load({"text": "t", "quote": "q", "type": "Other"})
        with pytest.raises(AttributeError):
            comment.text = "changed"
