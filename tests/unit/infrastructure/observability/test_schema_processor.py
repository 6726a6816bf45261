from storefront_api.infrastructure.observability.logging.schema_processor import (
    storefront_schema_processor,
)


def test_request_log_is_nested():
    event = {
        "event": "Request processed",
        "level": "info",
        "timestamp": "2024-01-01T00:00:00Z",
        "correlation_id": "corr-1",
        "trace_id": "trace-1",
        "processing_status": "success",
        "processing_http_status": 200,
        "processing_duration_ms": "12.5",
        "context_endpoint": "/products",
        "context_method": "GET",
        "context_client_ip": "127.0.0.1",
        "custom": "value",
    }

    result = storefront_schema_processor(None, "info", event)

    assert result["message"] == "Request processed"
    assert result["service"] == "storefront-api"
    assert result["correlation_id"] == "corr-1"
    assert result["processing"] == {
        "status": "success",
        "http_status": 200,
        "duration_ms": 12.5,
    }
    assert result["context"] == {
        "endpoint": "/products",
        "method": "GET",
        "client_ip": "127.0.0.1",
    }
    assert result["extra"] == {"custom": "value"}
    assert "eventId" in result["event"]


def test_optional_blocks_are_omitted():
    result = storefront_schema_processor(None, "info", {"event": "plain"})

    assert "processing" not in result
    assert "context" not in result
    assert "extra" not in result


def test_unknown_prefixed_keys_stay_in_extra():
    result = storefront_schema_processor(
        None, "error", {"event": "boom", "error_type": "StorageError", "context_component": "db"}
    )

    assert "error" not in result
    assert "context" not in result
    assert result["extra"] == {"error_type": "StorageError", "context_component": "db"}
