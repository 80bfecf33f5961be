"""
Prometheus metrics collection.
"""

from prometheus_client import Counter, Gauge, Histogram

# ============================================================
# HTTP Metrics
# ============================================================

http_requests_total = Counter(
    "comptoir_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "comptoir_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

http_errors_total = Counter(
    "comptoir_http_errors_total",
    "Total HTTP errors",
    ["method", "endpoint", "error_type"],
)

rate_limit_rejections_total = Counter(
    "comptoir_rate_limit_rejections_total",
    "Requests rejected by the rate limiter",
)

# ============================================================
# Business Metrics
# ============================================================

users_registered_total = Counter(
    "comptoir_users_registered_total",
    "Total registered users",
)

staking_positions_total = Counter(
    "comptoir_staking_positions_total",
    "Staking positions opened or closed",
    ["action"],
)

lending_positions_total = Counter(
    "comptoir_lending_positions_total",
    "Lending positions opened or closed",
    ["type", "action"],
)

governance_votes_total = Counter(
    "comptoir_governance_votes_total",
    "Votes cast on proposals",
    ["support"],
)

proposals_total = Counter(
    "comptoir_proposals_total",
    "Proposals created or resolved",
    ["status"],
)

trades_total = Counter(
    "comptoir_trades_total",
    "Recorded trades",
    ["type"],
)

trading_fees_total = Counter(
    "comptoir_trading_fees_total",
    "Sum of fees charged on trades",
)

leaderboard_players = Gauge(
    "comptoir_leaderboard_players",
    "Players present on the leaderboard",
)
