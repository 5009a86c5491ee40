"""Tests for buildlog schema models."""

import pytest
from pydantic import ValidationError

from buildlog.models import (
    ActionStep,
    BuildlogMetadataV2,
    BuildlogV1,
    BuildlogV2,
    CaptureFormat,
    CodeChangeEvent,
    FileSnapshot,
    PromptStep,
    TerminalStep,
)


class TestV2Document:
    def test_valid_document(self, v2_data):
        doc = BuildlogV2.model_validate(v2_data)
        assert doc.format == CaptureFormat.SLIM
        assert doc.metadata.title == "Test Session"
        assert isinstance(doc.steps[0], PromptStep)
        assert isinstance(doc.steps[1], ActionStep)
        assert doc.steps[1].files_created == ["index.ts"]
        assert doc.outcome.can_replicate is True

    def test_rejects_wrong_version(self, v2_data):
        v2_data["version"] = "1.0.0"
        with pytest.raises(ValidationError):
            BuildlogV2.model_validate(v2_data)

    @pytest.mark.parametrize("field", ["format", "outcome", "steps", "metadata"])
    def test_rejects_missing_root_field(self, v2_data, field):
        del v2_data[field]
        with pytest.raises(ValidationError):
            BuildlogV2.model_validate(v2_data)

    def test_rejects_unknown_format(self, v2_data):
        v2_data["format"] = "medium"
        with pytest.raises(ValidationError):
            BuildlogV2.model_validate(v2_data)

    def test_rejects_unknown_step_type(self, v2_data):
        v2_data["steps"][0]["type"] = "invalid"
        with pytest.raises(ValidationError):
            BuildlogV2.model_validate(v2_data)

    def test_rejects_v1_event_type_in_v2(self, v2_data):
        v2_data["steps"][1]["type"] = "code_change"
        with pytest.raises(ValidationError):
            BuildlogV2.model_validate(v2_data)

    def test_slim_document_may_carry_full_fields(self, v2_data):
        v2_data["steps"][1]["aiResponse"] = "Long response"
        v2_data["steps"][1]["diffs"] = {"index.ts": "+export const hi = 1"}
        doc = BuildlogV2.model_validate(v2_data)
        assert doc.format == CaptureFormat.SLIM
        assert doc.steps[1].ai_response == "Long response"

    def test_unordered_sequence_is_accepted(self, v2_data):
        v2_data["steps"][0]["sequence"] = 7
        v2_data["steps"][1]["timestamp"] = 0
        v2_data["steps"][0]["timestamp"] = 100
        BuildlogV2.model_validate(v2_data)

    def test_unknown_keys_are_dropped(self, v2_data):
        v2_data["extra"] = "ignored"
        doc = BuildlogV2.model_validate(v2_data)
        assert "extra" not in doc.model_dump(by_alias=True)

    def test_document_is_frozen(self, v2_data):
        doc = BuildlogV2.model_validate(v2_data)
        with pytest.raises(ValidationError):
            doc.format = CaptureFormat.FULL


class TestV2Metadata:
    def _metadata(self, v2_data, **overrides):
        data = dict(v2_data["metadata"])
        data.update(overrides)
        return data

    def test_requires_replicable(self, v2_data):
        data = self._metadata(v2_data)
        del data["replicable"]
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(data)

    def test_requires_single_provider(self, v2_data):
        data = self._metadata(v2_data)
        del data["aiProvider"]
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(data)

    @pytest.mark.parametrize("title", ["", "x" * 201])
    def test_title_length(self, v2_data, title):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, title=title))

    def test_title_at_limit(self, v2_data):
        meta = BuildlogMetadataV2.model_validate(self._metadata(v2_data, title="x" * 200))
        assert len(meta.title) == 200

    def test_description_limit(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, description="d" * 2001))

    def test_too_many_tags(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, tags=[f"t{i}" for i in range(21)]))

    def test_tag_too_long(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, tags=["t" * 51]))

    def test_tags_at_limit(self, v2_data):
        meta = BuildlogMetadataV2.model_validate(
            self._metadata(v2_data, tags=["t" * 50 for _ in range(20)])
        )
        assert len(meta.tags) == 20

    @pytest.mark.parametrize(
        "created_at",
        [
            "yesterday",
            "2026-02-01",
            "2026-13-01T00:00:00Z",
            "2026-02-01 14:30:00Z",
            "2026-02-01T14:30:00",
            "2026-02-01T14:30:00Z\n",
            "\uff12\uff10\uff12\uff16-02-01T14:30:00Z",
        ],
    )
    def test_rejects_bad_datetime(self, v2_data, created_at):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, createdAt=created_at))

    def test_accepts_fractional_seconds(self, v2_data):
        meta = BuildlogMetadataV2.model_validate(
            self._metadata(v2_data, createdAt="2026-02-01T14:30:00.123456789Z")
        )
        assert meta.created_at.endswith("Z")

    def test_accepts_any_uuid_version(self, v2_data):
        # v1 time-based UUID, uppercase
        meta = BuildlogMetadataV2.model_validate(
            self._metadata(v2_data, id="C232AB00-9414-11EC-B3C8-9E6BDECED846")
        )
        assert meta.id == "C232AB00-9414-11EC-B3C8-9E6BDECED846"

    def test_rejects_malformed_uuid(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, id="not-a-uuid"))

    def test_rejects_unknown_editor(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, editor="notepad"))

    def test_rejects_string_duration(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, durationSeconds="300"))

    def test_rejects_negative_duration(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, durationSeconds=-1))

    def test_integral_float_duration(self, v2_data):
        meta = BuildlogMetadataV2.model_validate(self._metadata(v2_data, durationSeconds=300.0))
        assert meta.duration_seconds == 300

    def test_rejects_bad_author_url(self, v2_data):
        with pytest.raises(ValidationError):
            BuildlogMetadataV2.model_validate(self._metadata(v2_data, author={"url": "not a url"}))

    def test_accepts_author(self, v2_data):
        meta = BuildlogMetadataV2.model_validate(
            self._metadata(v2_data, author={"name": "Sam", "url": "https://example.com/sam"})
        )
        assert meta.author.url == "https://example.com/sam"


class TestSteps:
    def test_rejects_negative_timestamp(self):
        with pytest.raises(ValidationError):
            PromptStep.model_validate({
                "id": "550e8400-e29b-41d4-a716-446655440001",
                "type": "prompt",
                "timestamp": -0.5,
                "sequence": 0,
                "content": "hi",
            })

    def test_rejects_fractional_sequence(self):
        with pytest.raises(ValidationError):
            PromptStep.model_validate({
                "id": "550e8400-e29b-41d4-a716-446655440001",
                "type": "prompt",
                "timestamp": 0,
                "sequence": 1.5,
                "content": "hi",
            })

    def test_rejects_empty_prompt(self):
        with pytest.raises(ValidationError):
            PromptStep.model_validate({
                "id": "550e8400-e29b-41d4-a716-446655440001",
                "type": "prompt",
                "timestamp": 0,
                "sequence": 0,
                "content": "",
            })

    def test_terminal_negative_exit_code_allowed(self):
        step = TerminalStep.model_validate({
            "id": "550e8400-e29b-41d4-a716-446655440001",
            "type": "terminal",
            "timestamp": 1,
            "sequence": 0,
            "command": "false",
            "exitCode": -1,
        })
        assert step.exit_code == -1

    def test_populate_by_python_name(self):
        step = ActionStep(
            id="550e8400-e29b-41d4-a716-446655440001",
            type="action",
            timestamp=0,
            sequence=0,
            summary="Edited",
            files_modified=["a.py"],
        )
        assert step.model_dump(by_alias=True, exclude_unset=True)["filesModified"] == ["a.py"]

    @pytest.mark.parametrize("timestamp", [float("inf"), float("nan")])
    def test_rejects_non_finite_timestamp(self, timestamp):
        with pytest.raises(ValidationError):
            PromptStep.model_validate({
                "id": "550e8400-e29b-41d4-a716-446655440001",
                "type": "prompt",
                "timestamp": timestamp,
                "sequence": 0,
                "content": "hi",
            })


class TestNullFields:
    """Optional fields may be omitted, but an explicit null is rejected."""

    def test_omitted_optional_field_reads_as_none(self, v2_data):
        doc = BuildlogV2.model_validate(v2_data)
        assert doc.metadata.description is None
        assert doc.steps[0].intent is None

    def test_null_metadata_description(self, v2_data):
        v2_data["metadata"]["description"] = None
        with pytest.raises(ValidationError) as exc_info:
            BuildlogV2.model_validate(v2_data)
        locs = [err["loc"] for err in exc_info.value.errors()]
        assert ("metadata", "description") in locs

    def test_null_step_field(self, v2_data):
        v2_data["steps"][0]["intent"] = None
        with pytest.raises(ValidationError):
            BuildlogV2.model_validate(v2_data)

    def test_null_nested_record(self, v2_data):
        v2_data["metadata"]["author"] = None
        with pytest.raises(ValidationError):
            BuildlogV2.model_validate(v2_data)

    def test_null_v1_custom(self, v1_data):
        v1_data["metadata"]["custom"] = None
        with pytest.raises(ValidationError):
            BuildlogV1.model_validate(v1_data)

    def test_null_required_field_keeps_type_error(self, v2_data):
        v2_data["metadata"]["title"] = None
        with pytest.raises(ValidationError) as exc_info:
            BuildlogV2.model_validate(v2_data)
        assert exc_info.value.errors()[0]["type"] == "string_type"


class TestV1Document:
    def test_valid_document(self, v1_data):
        doc = BuildlogV1.model_validate(v1_data)
        assert doc.metadata.custom["nested"] == {"anything": [1, None, True]}
        assert len(doc.events) == 2
        assert doc.events[1].token_usage.output == 40

    @pytest.mark.parametrize("field", ["initialState", "finalState", "events"])
    def test_rejects_missing_root_field(self, v1_data, field):
        del v1_data[field]
        with pytest.raises(ValidationError):
            BuildlogV1.model_validate(v1_data)

    def test_rejects_v2_step_type_in_v1(self, v1_data):
        v1_data["events"][1]["type"] = "action"
        with pytest.raises(ValidationError):
            BuildlogV1.model_validate(v1_data)

    def test_code_change_requires_known_source(self, v1_data):
        base = {
            "id": "550e8400-e29b-41d4-a716-446655440003",
            "type": "code_change",
            "timestamp": 4,
            "sequence": 2,
            "filePath": "hello.py",
            "diff": "@@ -1 +1 @@",
        }
        with pytest.raises(ValidationError):
            CodeChangeEvent.model_validate({**base, "source": "robot"})
        event = CodeChangeEvent.model_validate({**base, "source": "ai_partial"})
        assert event.source.value == "ai_partial"

    def test_file_create_source_is_restricted(self, v1_data):
        v1_data["events"].append({
            "id": "550e8400-e29b-41d4-a716-446655440003",
            "type": "file_create",
            "timestamp": 4,
            "sequence": 2,
            "filePath": "a.py",
            "content": "",
            "language": "python",
            "source": "ai_partial",
        })
        with pytest.raises(ValidationError):
            BuildlogV1.model_validate(v1_data)

    def test_file_snapshot_requires_path(self):
        with pytest.raises(ValidationError):
            FileSnapshot.model_validate({"path": "", "content": "", "language": "text"})
