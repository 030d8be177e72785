# Summary counters shown as "count (share%)" cards: (label, summary key)
SUMMARY_COUNTS = [
    ("Quick Trade", "quick_trade_count"),
    ("Kârlı İşlemler", "profitable_trades_count"),
    ("Zararlı İşlemler", "loss_trades_count"),
    ("Transfer Edilen Tokenler", "transferred_from_another_account_count"),
    ("Başka Cüzdana Aktarılan Tokenler", "traded_to_another_wallet_count"),
    ("Gerçekleşmemiş Kâr/Zarar Olan Tokenler", "unrealized_profit_count"),
]

# Badges on a token card: (record flag, label, tailwind colour)
TOKEN_BADGES = [
    ("is_quick_trade", "Quick Trade", "blue"),
    ("coin_traded_to_another_wallet", "Başka Cüzdana Transfer Edildi", "yellow"),
    ("is_coin_transferred_from_another_account", "Başka Cüzdandan Transfer Edildi", "purple"),
    ("is_unrealized_profit", "Gerçekleşmemiş Kâr/Zarar", "indigo"),
]

# Filter checkboxes: (view filter name, query parameter, label)
FILTER_OPTIONS = [
    ("quick_trade", "quick_trade", "Quick Trade"),
    ("transferred_from", "is_coin_transferred_from_another_account", "Başka Cüzdandan Gelen"),
    ("transferred_to", "coin_traded_to_another_wallet", "Bu Cüzdandan Giden"),
    ("unrealized_profit", "is_unrealized_profit", "Gerçekleşmemiş Kâr/Zarar"),
]

TOKEN_PLACEHOLDER_IMAGE = "https://placehold.co/40x40?text=Token"
SOLSCAN_TOKEN_URL = "https://solscan.io/token/{address}"

PAGE_TEMPLATE = '''
<!DOCTYPE html>
<html lang="tr">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Solana Cüzdan Analizi</title>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-white text-gray-900 dark:bg-gray-950 dark:text-gray-100">
<div class="flex flex-col items-center justify-start min-h-screen p-4">
    <form id="search-form" method="get" action="{{ url_for('index') }}" class="w-full max-w-md mb-8">
        <h1 class="text-2xl font-bold text-center mb-6">Solana Cüzdan Ara</h1>
        <div class="flex flex-col sm:flex-row gap-2 mb-4">
            <input
                type="text"
                name="address"
                value="{{ state.address }}"
                placeholder="Solana cüzdan adresi girin"
                class="flex-1 rounded-lg border border-black/[.08] dark:border-white/[.145] bg-transparent px-4 py-2 text-sm focus:outline-none focus:ring-2 focus:ring-blue-500"
                aria-label="Solana cüzdan adresi"
            />
            <button
                id="search-button"
                type="submit"
                class="rounded-lg bg-gray-900 text-white hover:bg-[#383838] dark:bg-white dark:text-gray-900 dark:hover:bg-[#ccc] px-4 py-2 text-sm font-medium transition-colors"
                aria-label="Ara"
            >Ara</button>
        </div>

        <div class="mt-4 p-4 bg-gray-50 dark:bg-black/10 rounded-lg">
            <p class="text-sm font-medium mb-3">Filtreleme Seçenekleri</p>
            <div class="space-y-2">
                {% for name, param, label in filter_options %}
                <div class="flex items-center">
                    <input
                        type="checkbox"
                        id="{{ name }}Filter"
                        name="{{ param }}"
                        value="true"
                        {% if state.filters[name] %}checked{% endif %}
                        class="h-4 w-4 rounded border-gray-300 text-blue-600 focus:ring-blue-500"
                    />
                    <label for="{{ name }}Filter" class="ml-2 text-sm text-gray-700 dark:text-gray-300">{{ label }}</label>
                </div>
                {% endfor %}
            </div>
        </div>

        <div class="mt-6">
            <p class="text-sm font-medium mb-2 text-center">Analiz Süresi</p>
            <div class="flex justify-between gap-2">
                {% for period in periods %}
                <label class="flex-1">
                    <input type="radio" name="days" value="{{ period }}" class="sr-only peer" {% if state.period == period %}checked{% endif %}>
                    <span class="block text-center py-2 text-sm font-medium rounded-lg cursor-pointer transition-colors border border-black/[.08] dark:border-white/[.145] hover:bg-black/[.05] peer-checked:bg-gray-900 peer-checked:text-white">{{ period }} Gün</span>
                </label>
                {% endfor %}
            </div>
        </div>

        <div class="mt-6">
            <p class="text-sm font-medium mb-2 text-center">Quick Trade Süresi</p>
            <div class="flex flex-wrap justify-between gap-2 mb-2">
                {% for duration in quick_trade_presets %}
                <label class="flex-1 min-w-[60px]">
                    <input type="radio" name="quick_trade_minutes" value="{{ duration }}" class="sr-only peer preset-duration" {% if is_preset_selected(state, duration) %}checked{% endif %}>
                    <span class="block text-center py-2 text-sm font-medium rounded-lg cursor-pointer transition-colors border border-black/[.08] dark:border-white/[.145] hover:bg-black/[.05] peer-checked:bg-gray-900 peer-checked:text-white">{{ duration }} Dakika</span>
                </label>
                {% endfor %}
            </div>
            <div class="flex gap-2 items-center">
                <input
                    id="custom-duration"
                    type="number"
                    min="1"
                    step="any"
                    name="custom_minutes"
                    value="{{ state.custom_duration }}"
                    placeholder="Özel süre (dakika)"
                    class="flex-1 rounded-lg border border-black/[.08] dark:border-white/[.145] bg-transparent px-4 py-2 text-sm focus:outline-none focus:ring-2 focus:ring-blue-500"
                    aria-label="Özel quick trade süresi"
                />
                <span class="text-sm font-medium">Dakika</span>
            </div>
        </div>
    </form>

    {% if state.error %}
    <div id="error" class="w-full max-w-4xl p-4 mb-6 bg-red-100 border border-red-300 rounded-lg text-red-800">
        {{ state.error }}
    </div>
    {% endif %}

    <div id="loading" class="hidden w-full max-w-4xl justify-center items-center py-16">
        <div class="animate-spin rounded-full h-16 w-16 border-t-2 border-b-2 border-gray-900"></div>
        <p class="ml-4 text-lg font-medium">Analiz yapılıyor...</p>
    </div>

    {% if state.status == "result" %}
    <div id="result" class="w-full max-w-4xl">
        <div class="bg-white dark:bg-black/20 rounded-lg shadow-md p-6 mb-6">
            <h2 class="text-xl font-bold mb-4">Cüzdan Özeti</h2>
            <div class="grid grid-cols-2 sm:grid-cols-4 gap-4">
                <div class="bg-gray-50 dark:bg-black/10 p-3 rounded-lg">
                    <p class="text-sm text-gray-500 dark:text-gray-400">Toplam İşlem</p>
                    <p class="text-lg font-semibold">{{ summary.get("total_coins_analyzed", 0) }}</p>
                </div>
                {% for label, key in summary_counts %}
                <div class="bg-gray-50 dark:bg-black/10 p-3 rounded-lg">
                    <p class="text-sm text-gray-500 dark:text-gray-400">{{ label }}</p>
                    <p class="text-lg font-semibold">
                        {{ summary.get(key, 0) }}
                        <span class="text-xs text-gray-500 ml-2">({{ summary.get(key, 0) | share(summary.get("total_coins_analyzed", 0)) }})</span>
                    </p>
                </div>
                {% endfor %}
            </div>
            <div class="mt-4 grid grid-cols-1 sm:grid-cols-3 gap-4">
                {% set total_profit = summary.get("total_profit_usd") %}
                {% set total_roi = summary.get("total_roi_percentage") %}
                <div class="p-3 rounded-lg {{ 'bg-green-50 dark:bg-green-900/20' if total_profit | gain else 'bg-red-50 dark:bg-red-900/20' }}">
                    <p class="text-sm text-gray-500 dark:text-gray-400">Toplam Kâr/Zarar</p>
                    <p class="text-lg font-semibold {{ 'text-green-600 dark:text-green-400' if total_profit | gain else 'text-red-600 dark:text-red-400' }}">{{ total_profit | currency }}</p>
                </div>
                <div class="p-3 rounded-lg {{ 'bg-green-50 dark:bg-green-900/20' if total_roi | gain else 'bg-red-50 dark:bg-red-900/20' }}">
                    <p class="text-sm text-gray-500 dark:text-gray-400">Toplam ROI</p>
                    <p class="text-lg font-semibold {{ 'text-green-600 dark:text-green-400' if total_roi | gain else 'text-red-600 dark:text-red-400' }}">{{ total_roi | percentage }}</p>
                </div>
                <div class="bg-gray-50 dark:bg-black/10 p-3 rounded-lg">
                    <p class="text-sm text-gray-500 dark:text-gray-400">Toplam Yatırım</p>
                    <p class="text-lg font-semibold">{{ summary.get("total_buy_value_usd") | currency }}</p>
                </div>
            </div>
            <div class="mt-4">
                <p class="text-sm text-gray-500 dark:text-gray-400">Cüzdan Adresi</p>
                <p class="text-sm font-mono break-all">{{ wallet_address }}</p>
            </div>
        </div>

        <h2 class="text-xl font-bold mb-4">İşlemler</h2>
        <div class="space-y-4">
            {% for token in analysis %}
            {% set profit = token.get("profit_usd") %}
            <div class="token-card bg-white dark:bg-black/20 rounded-lg shadow-md p-4 border-l-4 {{ 'border-green-500' if profit | gain else 'border-red-500' }}">
                <div class="flex items-center gap-3 mb-3">
                    {% if token.get("token_image_url") %}
                    <img src="{{ token.get('token_image_url') }}" alt="{{ token.get('token_name', '') }}" class="w-10 h-10 rounded-full"
                         onerror="this.onerror=null;this.src='{{ placeholder_image }}'">
                    {% else %}
                    <div class="w-10 h-10 bg-gray-200 dark:bg-gray-700 rounded-full flex items-center justify-center">
                        <span class="text-xs">{{ token.get("token_symbol") or "?" }}</span>
                    </div>
                    {% endif %}
                    <div>
                        <h3 class="font-semibold">{{ token.get("token_name") or token.get("token_symbol") or "İsimsiz Token" }}</h3>
                        <p class="text-xs text-gray-500 dark:text-gray-400">{{ token.get("token_symbol", "") }}</p>
                    </div>
                    <div class="ml-auto flex gap-1">
                        {% for flag, label, colour in token_badges %}
                        {% if token.get(flag) %}
                        <span class="px-2 py-1 bg-{{ colour }}-100 dark:bg-{{ colour }}-900/20 text-{{ colour }}-800 dark:text-{{ colour }}-300 text-xs rounded">{{ label }}</span>
                        {% endif %}
                        {% endfor %}
                    </div>
                </div>

                <div class="grid grid-cols-2 sm:grid-cols-4 gap-3 mb-3">
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">Kâr/Zarar</p>
                        <p class="font-semibold {{ 'text-green-600 dark:text-green-400' if profit | gain else 'text-red-600 dark:text-red-400' }}">{{ profit | currency }}</p>
                    </div>
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">ROI</p>
                        <p class="font-semibold {{ 'text-green-600 dark:text-green-400' if token.get('roi_percentage') | gain else 'text-red-600 dark:text-red-400' }}">{{ token.get("roi_percentage") | percentage }}</p>
                    </div>
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">Alım Değeri</p>
                        <p class="font-semibold">{{ token.get("total_buy_value_usd") | currency }}</p>
                    </div>
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">Satım Değeri</p>
                        <p class="font-semibold">{{ token.get("total_sell_value_usd") | currency }}</p>
                    </div>
                </div>

                <div class="grid grid-cols-2 gap-3 mb-3 text-sm">
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">Alınan Miktar</p>
                        <p class="font-medium">{{ token.get("total_buy_amount") | amount }}</p>
                    </div>
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">Satılan Miktar</p>
                        <p class="font-medium">{{ token.get("total_sell_amount") | amount }}</p>
                    </div>
                </div>

                <div class="grid grid-cols-2 sm:grid-cols-3 gap-3 text-sm">
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">İlk Alım</p>
                        <p>{{ token.get("first_buy_time") | unix_time }}</p>
                    </div>
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">Son Satım</p>
                        <p>{{ token.get("last_sell_time") | unix_time }}</p>
                    </div>
                    <div>
                        <p class="text-xs text-gray-500 dark:text-gray-400">İşlem Süresi</p>
                        <p>{{ token.get("trade_duration_minutes", 0) }} Dakika</p>
                    </div>
                </div>

                {% if token.get("token_address") %}
                <div class="mt-3 pt-3 border-t border-gray-100 dark:border-gray-800 text-xs text-gray-500 dark:text-gray-400">
                    <a href="{{ solscan_url.format(address=token.get('token_address')) }}" target="_blank" rel="noopener noreferrer" class="hover:text-blue-500 underline">{{ token.get("token_address") | short_address }}</a>
                </div>
                {% endif %}
            </div>
            {% endfor %}
        </div>
    </div>
    {% endif %}
</div>

<script>
    (function () {
        var form = document.getElementById("search-form");
        var button = document.getElementById("search-button");
        var custom = document.getElementById("custom-duration");
        var presets = document.querySelectorAll(".preset-duration");

        custom.addEventListener("input", function () {
            if (custom.value !== "") {
                presets.forEach(function (p) { p.checked = false; });
            }
        });
        presets.forEach(function (p) {
            p.addEventListener("change", function () { custom.value = ""; });
        });

        form.addEventListener("submit", function () {
            if (form.address.value.trim() === "") {
                return;
            }
            button.textContent = "Aranıyor...";
            button.classList.add("opacity-50", "cursor-not-allowed");
            var loading = document.getElementById("loading");
            loading.classList.remove("hidden");
            loading.classList.add("flex");
            ["error", "result"].forEach(function (id) {
                var el = document.getElementById(id);
                if (el) { el.remove(); }
            });
        });
    })();
</script>
</body>
</html>
'''
