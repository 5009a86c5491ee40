"""Pytest fixtures for buildlog tests."""

import pytest


@pytest.fixture
def v2_data():
    """Minimal valid slim v2 buildlog (one prompt, one action).

    Returns:
        Fresh dict; tests may mutate it
    """
    return {
        "version": "2.0.0",
        "format": "slim",
        "metadata": {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "title": "Test Session",
            "createdAt": "2026-02-01T14:30:00Z",
            "durationSeconds": 300,
            "editor": "vscode",
            "aiProvider": "claude",
            "replicable": True,
        },
        "steps": [
            {
                "id": "550e8400-e29b-41d4-a716-446655440001",
                "type": "prompt",
                "timestamp": 0,
                "sequence": 0,
                "content": "Create a hello world function",
                "context": ["index.ts"],
            },
            {
                "id": "550e8400-e29b-41d4-a716-446655440002",
                "type": "action",
                "timestamp": 5,
                "sequence": 1,
                "summary": "Created hello world function in index.ts",
                "filesCreated": ["index.ts"],
            },
        ],
        "outcome": {
            "status": "success",
            "summary": "Created a simple hello world function",
            "filesCreated": 1,
            "filesModified": 0,
            "canReplicate": True,
        },
    }


@pytest.fixture
def v2_full_data(v2_data):
    """Full-format v2 buildlog with full-only fields on action and terminal steps."""
    v2_data["format"] = "full"
    v2_data["steps"].extend([
        {
            "id": "550e8400-e29b-41d4-a716-446655440003",
            "type": "action",
            "timestamp": 10,
            "sequence": 2,
            "summary": "With full data",
            "aiResponse": "Full AI response text here...",
            "diffs": {"file.ts": "+ line added"},
        },
        {
            "id": "550e8400-e29b-41d4-a716-446655440004",
            "type": "terminal",
            "timestamp": 12,
            "sequence": 3,
            "command": "npm test",
            "result": "success",
            "output": "1 passing",
            "exitCode": 0,
        },
    ])
    return v2_data


@pytest.fixture
def v1_data():
    """Minimal valid v1 buildlog (one prompt, one AI response, one final file)."""
    return {
        "version": "1.0.0",
        "metadata": {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "title": "Legacy Session",
            "createdAt": "2025-06-01T09:00:00.000Z",
            "durationSeconds": 120,
            "editor": "cursor",
            "aiProviders": ["claude", "copilot"],
            "custom": {"team": "core", "nested": {"anything": [1, None, True]}},
        },
        "initialState": {"files": []},
        "events": [
            {
                "id": "550e8400-e29b-41d4-a716-446655440001",
                "type": "prompt",
                "timestamp": 0,
                "sequence": 0,
                "content": "Write a greeting",
            },
            {
                "id": "550e8400-e29b-41d4-a716-446655440002",
                "type": "ai_response",
                "timestamp": 3.5,
                "sequence": 1,
                "content": "Here you go",
                "promptEventId": "550e8400-e29b-41d4-a716-446655440001",
                "tokenUsage": {"input": 12, "output": 40},
            },
        ],
        "finalState": {
            "files": [
                {"path": "hello.py", "content": "print('hi')\n", "language": "python"},
            ],
        },
    }
