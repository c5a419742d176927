from common.core.security import select_api_key, verify_api_key


class TestSelectApiKey:
    def test_query_param_wins(self):
        assert select_api_key("from-query", "from-header") == "from-query"

    def test_falls_back_to_header(self):
        assert select_api_key(None, "from-header") == "from-header"
        assert select_api_key("", "from-header") == "from-header"

    def test_absent(self):
        assert select_api_key(None, None) is None
        assert select_api_key("", "") is None


class TestVerifyApiKey:
    def test_exact_match(self):
        assert verify_api_key("secret", "secret")

    def test_mismatch(self):
        assert not verify_api_key("secret ", "secret")
        assert not verify_api_key("SECRET", "secret")

    def test_missing_key(self):
        assert not verify_api_key(None, "secret")
        assert not verify_api_key("", "secret")

    def test_unconfigured_secret_rejects(self):
        assert not verify_api_key("", "")
        assert not verify_api_key("anything", "")
