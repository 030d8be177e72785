import logging
from datetime import datetime
from typing import Any, Mapping, Optional

from flask import Flask, current_app, jsonify, render_template_string, request
from flask_cors import CORS

from wallet_analysis_web import __version__, formatting, view_state
from wallet_analysis_web.config import load_settings
from wallet_analysis_web.page import (
    FILTER_OPTIONS,
    PAGE_TEMPLATE,
    SOLSCAN_TOKEN_URL,
    SUMMARY_COUNTS,
    TOKEN_BADGES,
    TOKEN_PLACEHOLDER_IMAGE,
)
from wallet_analysis_web.proxy import proxy_wallet_analysis
from wallet_analysis_web.upstream import AnalysisClient

logger = logging.getLogger("wallet-analysis-web")

CLIENT_EXTENSION = "analysis_client"


def get_client() -> AnalysisClient:
    """The app's analysis service client, created on first use."""
    client = current_app.extensions.get(CLIENT_EXTENSION)
    if client is None:
        client = AnalysisClient(
            current_app.config["ANALYSIS_API_URL"],
            timeout=current_app.config["ANALYSIS_API_TIMEOUT"],
        )
        current_app.extensions[CLIENT_EXTENSION] = client
    return client


def run_search(state: view_state.ViewState) -> view_state.ViewState:
    """
    Submit the page state and settle it against the proxy.

    Called in-process with the same handler that serves /api/wallet/analysis.
    """
    state = view_state.submit(state)
    if not state.loading:
        return state

    body, status = proxy_wallet_analysis(view_state.query_params(state), get_client())

    if status != 200:
        message = body.get("error") if isinstance(body, dict) else None
        return view_state.request_failed(state, message or view_state.NO_RESPONSE)

    if not isinstance(body, dict) or not body.get("success"):
        message = body.get("error") if isinstance(body, dict) else None
        return view_state.request_failed(state, message)

    return view_state.request_succeeded(state, body)


def _register_filters(app: Flask) -> None:
    def locale() -> str:
        return current_app.config["DISPLAY_LOCALE"]

    app.add_template_filter(lambda v: formatting.format_currency(v, locale()), "currency")
    app.add_template_filter(lambda v: formatting.format_percentage(v, locale()), "percentage")
    app.add_template_filter(lambda v: formatting.format_amount(v, locale()), "amount")
    app.add_template_filter(
        lambda v: formatting.format_unix_time(v, locale(), current_app.config["DISPLAY_TIMEZONE"]),
        "unix_time",
    )
    app.add_template_filter(formatting.format_share, "share")
    app.add_template_filter(formatting.short_address, "short_address")
    app.add_template_filter(formatting.is_gain, "gain")


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(load_settings(overrides))
    CORS(app, resources={r"/api/*": {"origins": "*"}})
    _register_filters(app)

    logger.info(f"Analysis service base URL: {app.config['ANALYSIS_API_URL']}")

    @app.route("/api/wallet/analysis", methods=["GET"])
    def wallet_analysis():
        """
        Proxy a wallet analysis request to the external analysis service
        """
        body, status = proxy_wallet_analysis(request.args, get_client())
        return jsonify(body), status

    @app.route("/api/health", methods=["GET"])
    def health_check():
        """
        Health check endpoint
        """
        return jsonify({
            "status": "healthy",
            "version": __version__,
            "timestamp": datetime.now().isoformat(),
            "analysis_api_url": current_app.config["ANALYSIS_API_URL"],
            "analysis_api_timeout": current_app.config["ANALYSIS_API_TIMEOUT"],
        })

    @app.route("/", methods=["GET"])
    def index():
        """
        Serve the wallet search page, running the search when the form was submitted
        """
        state = view_state.state_from_query(request.args)
        if "address" in request.args:
            state = run_search(state)

        data = (state.result or {}).get("data")
        if not isinstance(data, dict):
            data = {}
        summary = data.get("summary")
        if not isinstance(summary, dict):
            summary = {}
        analysis = data.get("analysis")
        if not isinstance(analysis, list):
            analysis = []
        return render_template_string(
            PAGE_TEMPLATE,
            state=state,
            summary=summary,
            analysis=[token for token in analysis if isinstance(token, dict)],
            wallet_address=data.get("wallet_address", ""),
            periods=view_state.PERIODS,
            quick_trade_presets=view_state.QUICK_TRADE_PRESETS,
            is_preset_selected=view_state.is_preset_selected,
            filter_options=FILTER_OPTIONS,
            summary_counts=SUMMARY_COUNTS,
            token_badges=TOKEN_BADGES,
            placeholder_image=TOKEN_PLACEHOLDER_IMAGE,
            solscan_url=SOLSCAN_TOKEN_URL,
        )

    return app
