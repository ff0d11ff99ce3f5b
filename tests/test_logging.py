from config.settings import mask_sensitive_data


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_masked_value_keeps_its_key(self):
        event_dict = {"event": "test", "dsn": "secret: hunter2"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["dsn"] == "secret: ***MASKED***"

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.created", "product_id": 42, "changed_by": "alice"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result == {
            "event": "product.created",
            "product_id": 42,
            "changed_by": "alice",
        }
