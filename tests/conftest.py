"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from wallet_analysis_web.app import CLIENT_EXTENSION, create_app
from wallet_analysis_web.upstream import AnalysisClient

UPSTREAM_URL = "http://analysis.test"


def make_response(status_code=200, json_body=None, text=""):
    """A stand-in for requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.text = text
    if json_body is None:
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def sample_payload():
    """Analysis response as the upstream service returns it."""
    return {
        "success": True,
        "data": {
            "wallet_address": "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin",
            "analysis": [
                {
                    "token_address": "So11111111111111111111111111111111111111112",
                    "token_name": "Wrapped SOL",
                    "token_symbol": "SOL",
                    "token_image_url": "",
                    "total_buy_amount": "12.5",
                    "total_sell_amount": "12.5",
                    "total_buy_value_usd": "1500.00",
                    "total_sell_value_usd": "1750.25",
                    "current_price_usd": "140.10",
                    "profit_usd": "250.25",
                    "roi_percentage": "16.68",
                    "is_quick_trade": True,
                    "is_coin_transferred_from_another_account": False,
                    "coin_traded_to_another_wallet": False,
                    "is_unrealized_profit": False,
                    "first_buy_time": 1700000000,
                    "last_sell_time": 1700000240,
                    "trade_duration_minutes": 4,
                },
                {
                    "token_address": "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
                    "token_name": "",
                    "token_symbol": "BONK",
                    "token_image_url": "https://example.com/bonk.png",
                    "total_buy_amount": "1000000",
                    "total_sell_amount": "0",
                    "total_buy_value_usd": "20.00",
                    "total_sell_value_usd": "0",
                    "current_price_usd": "0.000015",
                    "profit_usd": "-5.00",
                    "roi_percentage": "-25",
                    "is_quick_trade": False,
                    "is_coin_transferred_from_another_account": True,
                    "coin_traded_to_another_wallet": False,
                    "is_unrealized_profit": True,
                    "first_buy_time": 1700003600,
                    "last_sell_time": 0,
                    "trade_duration_minutes": 0,
                },
            ],
            "summary": {
                "total_coins_analyzed": 2,
                "quick_trade_count": 1,
                "profitable_trades_count": 1,
                "loss_trades_count": 1,
                "transferred_from_another_account_count": 1,
                "traded_to_another_wallet_count": 0,
                "unrealized_profit_count": 1,
                "total_profit_usd": "245.25",
                "total_roi_percentage": "16.13",
                "total_buy_value_usd": "1520.00",
            },
        },
    }


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture
def analysis_client(session):
    return AnalysisClient(UPSTREAM_URL, timeout=300, session=session)


@pytest.fixture
def app(analysis_client):
    app = create_app({
        "ANALYSIS_API_URL": UPSTREAM_URL,
        "DISPLAY_LOCALE": "tr_TR",
        "DISPLAY_TIMEZONE": "UTC",
    })
    app.config["TESTING"] = True
    app.extensions[CLIENT_EXTENSION] = analysis_client
    return app


@pytest.fixture
def http(app):
    return app.test_client()
