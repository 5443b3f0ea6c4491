from toolkicker.infrastructure.observability.logging.storage_event_processor import storage_event_processor


def test_nests_context_and_error_blocks(monkeypatch):
    monkeypatch.delenv("SERVICE_NAME", raising=False)
    event = {
        "event": "Failed to write store file",
        "level": "error",
        "timestamp": "2026-01-01T00:00:00Z",
        "context_component": "repositories",
        "storage_key": "toolkicker.cart.v1",
        "error_type": "OSError",
        "error_details": "disk full",
        "attempt": 1,
    }

    result = storage_event_processor(None, "error", event)

    assert result["message"] == "Failed to write store file"
    assert result["level"] == "error"
    assert result["service"] == "toolkicker"
    assert result["context"] == {"component": "repositories", "storage_key": "toolkicker.cart.v1"}
    assert result["error"] == {"type": "OSError", "details": "disk full"}
    assert result["extra"] == {"attempt": 1}


def test_omits_empty_blocks():
    result = storage_event_processor(None, "info", {"event": "Stores loaded"})

    assert "context" not in result
    assert "error" not in result
    assert "extra" not in result
