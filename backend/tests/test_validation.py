"""
Noteful Backend — Request Body Validation Tests
=================================================

What we test:
    ✅ Folder create/update require a non-blank name
    ✅ Note create reports the first missing field by name, in order
    ✅ Note create accepts empty content
    ✅ Note update keeps only truthy fields, never folder_id
"""

import pytest

from app.exceptions import ValidationError
from app.schemas.folder import FolderCreate, FolderUpdate
from app.schemas.note import NoteCreate, NoteUpdate
from app.services.validation import (
    FOLDER_NAME_REQUIRED,
    FOLDER_UPDATE_REQUIRED,
    NOTE_UPDATE_REQUIRED,
    is_blank,
    validate_folder_create,
    validate_folder_update,
    validate_note_create,
    validate_note_update,
)


class TestIsBlank:

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank(self, value):
        assert is_blank(value)

    def test_not_blank(self):
        assert not is_blank(" x ")


class TestFolderValidation:

    def test_create_returns_name(self):
        assert validate_folder_create(FolderCreate(name="Important")) == {"name": "Important"}

    @pytest.mark.parametrize("body", [None, FolderCreate(), FolderCreate(name=" ")])
    def test_create_requires_name(self, body):
        with pytest.raises(ValidationError) as exc_info:
            validate_folder_create(body)

        assert exc_info.value.message == FOLDER_NAME_REQUIRED
        assert exc_info.value.field == "name"

    def test_update_requires_name(self):
        with pytest.raises(ValidationError, match="must contain 'name'"):
            validate_folder_update(FolderUpdate(name=""))

    def test_update_message(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_folder_update(None)

        assert exc_info.value.message == FOLDER_UPDATE_REQUIRED


class TestNoteCreateValidation:

    def test_complete_body(self):
        fields = validate_note_create(NoteCreate(name="n", folder_id=1, content="c"))

        assert fields == {"name": "n", "folder_id": 1, "content": "c"}

    def test_empty_content_allowed(self):
        assert validate_note_create(NoteCreate(name="n", folder_id=1, content=""))["content"] == ""

    def test_first_missing_field_wins(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_note_create(NoteCreate(content="c"))

        assert exc_info.value.message == "Missing 'name' in request body"

    def test_folder_id_before_content(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_note_create(NoteCreate(name="n"))

        assert exc_info.value.field == "folder_id"

    def test_missing_content(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_note_create(NoteCreate(name="n", folder_id=0))

        assert exc_info.value.message == "Missing 'content' in request body"


class TestNoteUpdateValidation:

    def test_name_only(self):
        assert validate_note_update(NoteUpdate(name="New")) == {"name": "New"}

    def test_content_only(self):
        assert validate_note_update(NoteUpdate(content="Body")) == {"content": "Body"}

    def test_empty_content_is_written_with_name(self):
        assert validate_note_update(NoteUpdate(name="New", content="")) == {"name": "New", "content": ""}

    def test_blank_name_is_dropped(self):
        assert validate_note_update(NoteUpdate(name=" ", content="Body")) == {"content": "Body"}

    @pytest.mark.parametrize("body", [None, NoteUpdate(), NoteUpdate(name="  ", content="")])
    def test_neither_field(self, body):
        with pytest.raises(ValidationError) as exc_info:
            validate_note_update(body)

        assert exc_info.value.message == NOTE_UPDATE_REQUIRED
