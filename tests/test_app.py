"""Tests for the search page, health endpoint and settings."""

import pytest
import requests

from wallet_analysis_web.config import DEFAULT_API_URL, load_settings
from wallet_analysis_web.exceptions import ConfigurationError

from conftest import UPSTREAM_URL, make_response


class TestSearchPage:
    def test_first_visit(self, http, session) -> None:
        resp = http.get("/")
        html = resp.get_data(as_text=True)

        assert resp.status_code == 200
        assert "Solana Cüzdan Ara" in html
        assert 'id="result"' not in html
        assert 'id="error"' not in html
        session.get.assert_not_called()

    def test_empty_address_is_rejected_locally(self, http, session) -> None:
        html = http.get("/?address=&days=7").get_data(as_text=True)

        assert "Lütfen bir cüzdan adresi girin" in html
        session.get.assert_not_called()

    def test_result_rendering(self, http, session, sample_payload) -> None:
        session.get.return_value = make_response(200, sample_payload)

        html = http.get(
            "/?address=ABC123&days=7&quick_trade_minutes=5&is_unrealized_profit=true"
        ).get_data(as_text=True)

        assert session.get.call_args.kwargs["params"] == {
            "address": "ABC123",
            "quick_trade_minutes": "5",
            "days": "7",
            "is_unrealized_profit": "true",
        }
        assert "Cüzdan Özeti" in html
        assert "Wrapped SOL" in html
        assert "50.0%" in html
        assert "1.750,25" in html
        assert "14.11.2023 22:13:20" in html
        assert "https://solscan.io/token/So11111111111111111111111111111111111111112" in html
        assert "So1111...111112" in html
        # nameless token falls back to its symbol
        assert "BONK" in html

    def test_custom_duration_is_sent(self, http, session, sample_payload) -> None:
        session.get.return_value = make_response(200, sample_payload)

        http.get("/?address=ABC123&quick_trade_minutes=1&custom_minutes=45")

        assert session.get.call_args.kwargs["params"]["quick_trade_minutes"] == "45"

    def test_zero_total_does_not_break_shares(self, http, session) -> None:
        payload = {
            "success": True,
            "data": {
                "wallet_address": "ABC123",
                "analysis": [],
                "summary": {"total_coins_analyzed": 0, "quick_trade_count": 0},
            },
        }
        session.get.return_value = make_response(200, payload)

        html = http.get("/?address=ABC123").get_data(as_text=True)

        assert "0.0%" in html
        assert "NaN" not in html

    def test_out_of_range_timestamps_render_as_dash(self, http, session, sample_payload) -> None:
        token = sample_payload["data"]["analysis"][0]
        token["first_buy_time"] = 1700000000000
        token["last_sell_time"] = 1e20
        session.get.return_value = make_response(200, sample_payload)

        resp = http.get("/?address=ABC123")
        html = resp.get_data(as_text=True)

        assert resp.status_code == 200
        assert "Wrapped SOL" in html
        assert "14.11.2023 22:13:20" not in html

    def test_malformed_summary_and_records_are_skipped(self, http, session) -> None:
        payload = {
            "success": True,
            "data": {
                "wallet_address": "ABC123",
                "summary": [],
                "analysis": ["x", None, {"token_name": "Kept Token", "profit_usd": "1"}],
            },
        }
        session.get.return_value = make_response(200, payload)

        resp = http.get("/?address=ABC123")
        html = resp.get_data(as_text=True)

        assert resp.status_code == 200
        assert 'id="result"' in html
        assert "Kept Token" in html
        assert html.count("token-card") == 1

    def test_non_list_analysis_renders_empty(self, http, session) -> None:
        payload = {"success": True, "data": {"summary": {}, "analysis": "oops"}}
        session.get.return_value = make_response(200, payload)

        resp = http.get("/?address=ABC123")

        assert resp.status_code == 200
        assert "token-card" not in resp.get_data(as_text=True)

    def test_upstream_error_detail_is_shown(self, http, session) -> None:
        session.get.return_value = make_response(503, {"error": "Servis bakımda"})

        html = http.get("/?address=ABC123").get_data(as_text=True)

        assert "Servis bakımda" in html
        assert 'id="result"' not in html

    def test_business_error_is_shown(self, http, session) -> None:
        session.get.return_value = make_response(200, {"success": False, "error": "Cüzdan bulunamadı"})

        html = http.get("/?address=ABC123").get_data(as_text=True)

        assert "Cüzdan bulunamadı" in html

    def test_unreachable_upstream(self, http, session) -> None:
        session.get.side_effect = requests.exceptions.ConnectionError("refused")

        html = http.get("/?address=ABC123").get_data(as_text=True)

        assert "Analiz servisine ulaşılamadı" in html


class TestHealth:
    def test_health(self, http) -> None:
        body = http.get("/api/health").get_json()

        assert body["status"] == "healthy"
        assert body["analysis_api_url"] == UPSTREAM_URL
        assert body["analysis_api_timeout"] == 300


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("ANALYSIS_API_URL", "NEXT_PUBLIC_API_URL", "ANALYSIS_API_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        settings = load_settings()

        assert settings["ANALYSIS_API_URL"] == DEFAULT_API_URL
        assert settings["ANALYSIS_API_TIMEOUT"] == 300

    def test_legacy_env_name(self, monkeypatch) -> None:
        monkeypatch.delenv("ANALYSIS_API_URL", raising=False)
        monkeypatch.setenv("NEXT_PUBLIC_API_URL", "https://analysis.example.com/")

        assert load_settings()["ANALYSIS_API_URL"] == "https://analysis.example.com"

    def test_invalid_timeout(self) -> None:
        with pytest.raises(ConfigurationError):
            load_settings({"ANALYSIS_API_TIMEOUT": "soon"})

        with pytest.raises(ConfigurationError):
            load_settings({"ANALYSIS_API_TIMEOUT": 0})
