"""
View-model for the wallet search page.

The page state is a single frozen ``ViewState``; every user action is a pure
function from one state to the next, so the page logic can be exercised
without a browser or a running analysis service.
"""
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Union

PERIODS = (1, 3, 7, 30)
QUICK_TRADE_PRESETS = (1, 2, 5, 10, 30)
DEFAULT_PERIOD = 7
DEFAULT_QUICK_TRADE_MINUTES = 5

IDLE = "idle"
LOADING = "loading"
ERROR = "error"
RESULT = "result"

ADDRESS_MISSING = "Lütfen bir cüzdan adresi girin"
NO_RESPONSE = "API yanıt vermedi, lütfen daha sonra tekrar deneyin."
ANALYSIS_FAILED = "Bir hata oluştu. Lütfen daha sonra tekrar deneyin."

# filter name -> query parameter understood by the analysis service
FILTER_PARAMS = {
    "quick_trade": "quick_trade",
    "transferred_from": "is_coin_transferred_from_another_account",
    "transferred_to": "coin_traded_to_another_wallet",
    "unrealized_profit": "is_unrealized_profit",
}

Number = Union[int, float]


@dataclass(frozen=True)
class Filters:
    quick_trade: bool = False
    transferred_from: bool = False
    transferred_to: bool = False
    unrealized_profit: bool = True


@dataclass(frozen=True)
class ViewState:
    address: str = ""
    period: int = DEFAULT_PERIOD
    quick_trade_minutes: Number = DEFAULT_QUICK_TRADE_MINUTES
    custom_duration: str = ""
    filters: Filters = field(default_factory=Filters)
    status: str = IDLE
    error: Optional[str] = None
    result: Optional[Dict[str, Any]] = None

    @property
    def loading(self) -> bool:
        return self.status == LOADING


def parse_duration(text: str) -> Optional[Number]:
    """Positive finite number from the custom duration box, int when integral."""
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value) or value <= 0:
        return None
    return int(value) if value.is_integer() else value


# === Transitions ===
def set_address(state: ViewState, text: str) -> ViewState:
    return replace(state, address=text)


def select_period(state: ViewState, days: int) -> ViewState:
    if days not in PERIODS:
        raise ValueError(f"Unsupported analysis period: {days}")
    return replace(state, period=days)


def select_quick_trade_duration(state: ViewState, minutes: int) -> ViewState:
    if minutes not in QUICK_TRADE_PRESETS:
        raise ValueError(f"Unsupported quick trade preset: {minutes}")
    return replace(state, quick_trade_minutes=minutes, custom_duration="")


def set_custom_duration(state: ViewState, text: str) -> ViewState:
    """
    Store the custom duration text; a valid number also becomes the selected duration.

    Text that isn't a positive number is kept as typed but leaves the previous
    duration in place.
    """
    value = parse_duration(text)
    if value is None:
        return replace(state, custom_duration=text)
    return replace(state, custom_duration=text, quick_trade_minutes=value)


def set_filter(state: ViewState, name: str, enabled: bool) -> ViewState:
    if name not in FILTER_PARAMS:
        raise ValueError(f"Unknown filter: {name}")
    return replace(state, filters=replace(state.filters, **{name: bool(enabled)}))


def submit(state: ViewState) -> ViewState:
    """Start a search, or fail locally when there is no address to search for."""
    if not state.address.strip():
        return replace(state, status=ERROR, error=ADDRESS_MISSING, result=None)
    return replace(state, status=LOADING, error=None, result=None)


def request_succeeded(state: ViewState, payload: Dict[str, Any]) -> ViewState:
    return replace(state, status=RESULT, error=None, result=payload)


def request_failed(state: ViewState, message: Optional[str] = None) -> ViewState:
    return replace(state, status=ERROR, error=message or ANALYSIS_FAILED, result=None)


# === Queries ===
def is_preset_selected(state: ViewState, minutes: int) -> bool:
    return state.quick_trade_minutes == minutes and state.custom_duration == ""


def query_params(state: ViewState) -> Dict[str, str]:
    """
    Serialize the selections for the proxy; switched-off filters are left out.
    """
    params = {
        "address": state.address.strip(),
        "quick_trade_minutes": str(state.quick_trade_minutes),
        "days": str(state.period),
    }
    for name, param in FILTER_PARAMS.items():
        if getattr(state.filters, name):
            params[param] = "true"
    return params


def _as_int(raw: Any) -> Optional[int]:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def _is_checked(raw: Any) -> bool:
    return str(raw).lower() in ("true", "on", "1")


def state_from_query(args: Mapping[str, Any]) -> ViewState:
    """
    Rebuild the page state from the submitted search form.

    Browsers leave unchecked boxes out of a submitted form, so once the form
    has been sent (an ``address`` key is present) a missing filter means off.
    On a first visit the defaults apply.
    """
    state = ViewState()
    submitted = "address" in args

    state = set_address(state, str(args.get("address", "")))

    period = _as_int(args.get("days"))
    if period in PERIODS:
        state = select_period(state, period)

    preset = _as_int(args.get("quick_trade_minutes"))
    if preset in QUICK_TRADE_PRESETS:
        state = select_quick_trade_duration(state, preset)

    custom = str(args.get("custom_minutes", "")).strip()
    if custom:
        state = set_custom_duration(state, custom)

    if submitted:
        for name, param in FILTER_PARAMS.items():
            state = set_filter(state, name, _is_checked(args.get(param)))

    return state
