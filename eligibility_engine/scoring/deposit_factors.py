"""
Deposit Eligibility: 5 Factor Definitions

Separate factor set for deposit applications. Shares the bucket
mechanics and FactorResult with the loan factors:

  balanceHistory     25   current + average + max balance
  accountAge         20
  consistency        20   volume + monthly variance (lower is better)
  stability          20   months active, minus suspicious activity penalty
  depositExperience  15   previous deposits, minus default penalty
  ───────────────────────
  Total             100

Penalised factors are floored at 0 before the cap is applied.
"""
from __future__ import annotations

from eligibility_engine.scoring.buckets import (
    cap,
    label_at_least,
    label_at_most,
    points_at_least,
    points_at_most,
)
from eligibility_engine.scoring.loan_factors import FactorResult


# ═══════════════════════════════════════════════════════════════
# 1. BALANCE HISTORY  (max 25)
# ═══════════════════════════════════════════════════════════════
BALANCE_HISTORY_MAX = 25
CURRENT_BALANCE_TABLE = (
    (10000, 10),
    (5000, 8),
    (2000, 6),
    (500, 4),
)
CURRENT_BALANCE_FALLBACK = 1
AVERAGE_BALANCE_TABLE = (
    (5000, 10),
    (2000, 8),
    (1000, 6),
    (500, 3),
)
AVERAGE_BALANCE_FALLBACK = 1
MAX_BALANCE_TABLE = (
    (20000, 5),
    (10000, 4),
    (5000, 3),
)
MAX_BALANCE_FALLBACK = 1


def score_balance_history(
    current_balance: float,
    average_balance: float,
    max_balance: float,
) -> FactorResult:
    points = (
        points_at_least(current_balance, CURRENT_BALANCE_TABLE, CURRENT_BALANCE_FALLBACK)
        + points_at_least(average_balance, AVERAGE_BALANCE_TABLE, AVERAGE_BALANCE_FALLBACK)
        + points_at_least(max_balance, MAX_BALANCE_TABLE, MAX_BALANCE_FALLBACK)
    )
    return FactorResult(
        "balanceHistory",
        f"current {current_balance:.2f}, avg {average_balance:.2f}, max {max_balance:.2f}",
        f"{label_at_least(current_balance, CURRENT_BALANCE_TABLE)} / "
        f"{label_at_least(average_balance, AVERAGE_BALANCE_TABLE)} / "
        f"{label_at_least(max_balance, MAX_BALANCE_TABLE)}",
        cap(points, BALANCE_HISTORY_MAX),
        BALANCE_HISTORY_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 2. ACCOUNT AGE  (max 20)
#    Finer-grained than the loan table: 3+ months already counts
# ═══════════════════════════════════════════════════════════════
ACCOUNT_AGE_MAX = 20
ACCOUNT_AGE_TABLE = (
    (60, 20),
    (36, 17),
    (24, 14),
    (12, 10),
    (6, 6),
    (3, 3),
)
ACCOUNT_AGE_FALLBACK = 1


def score_account_age(account_age_months: int) -> FactorResult:
    points = points_at_least(account_age_months, ACCOUNT_AGE_TABLE, ACCOUNT_AGE_FALLBACK)
    return FactorResult(
        "accountAge",
        f"{account_age_months}m",
        label_at_least(account_age_months, ACCOUNT_AGE_TABLE),
        cap(points, ACCOUNT_AGE_MAX),
        ACCOUNT_AGE_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 3. TRANSACTION CONSISTENCY  (max 20)
#    monthly_variance = dispersion of monthly transaction counts
# ═══════════════════════════════════════════════════════════════
CONSISTENCY_MAX = 20
TRANSACTION_VOLUME_TABLE = (
    (200, 10),
    (100, 8),
    (50, 5),
    (20, 3),
)
TRANSACTION_VOLUME_FALLBACK = 1
VARIANCE_TABLE = (
    (2, 10),  # Very consistent
    (4, 8),
    (6, 5),
)
VARIANCE_FALLBACK = 2


def score_consistency(total_transactions: int, monthly_variance: float) -> FactorResult:
    points = points_at_least(
        total_transactions, TRANSACTION_VOLUME_TABLE, TRANSACTION_VOLUME_FALLBACK
    ) + points_at_most(monthly_variance, VARIANCE_TABLE, VARIANCE_FALLBACK)
    return FactorResult(
        "consistency",
        f"{total_transactions} total, variance {monthly_variance:g}",
        f"{label_at_least(total_transactions, TRANSACTION_VOLUME_TABLE)} total, "
        f"variance {label_at_most(monthly_variance, VARIANCE_TABLE)}",
        cap(points, CONSISTENCY_MAX),
        CONSISTENCY_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 4. ACCOUNT STABILITY  (max 20)
# ═══════════════════════════════════════════════════════════════
STABILITY_MAX = 20
MONTHS_ACTIVE_TABLE = (
    (48, 15),
    (24, 12),
    (12, 9),
    (6, 5),
)
MONTHS_ACTIVE_FALLBACK = 2
SUSPICIOUS_ACTIVITY_PENALTY = 2


def score_stability(months_active: int, suspicious_activity_count: int) -> FactorResult:
    base = points_at_least(months_active, MONTHS_ACTIVE_TABLE, MONTHS_ACTIVE_FALLBACK)
    penalty = suspicious_activity_count * SUSPICIOUS_ACTIVITY_PENALTY
    return FactorResult(
        "stability",
        f"{months_active}m active, {suspicious_activity_count} suspicious",
        f"{label_at_least(months_active, MONTHS_ACTIVE_TABLE)}m, -{penalty} penalty",
        cap(base - penalty, STABILITY_MAX),
        STABILITY_MAX,
    )


# ═══════════════════════════════════════════════════════════════
# 5. PREVIOUS DEPOSIT EXPERIENCE  (max 15)
# ═══════════════════════════════════════════════════════════════
DEPOSIT_EXPERIENCE_MAX = 15
PREVIOUS_DEPOSITS_TABLE = (
    (5, 12),
    (3, 9),
    (1, 5),
)
PREVIOUS_DEPOSITS_FALLBACK = 1
DEFAULTED_DEPOSIT_PENALTY = 5


def score_deposit_experience(previous_deposits: int, defaulted_deposits: int) -> FactorResult:
    base = points_at_least(previous_deposits, PREVIOUS_DEPOSITS_TABLE, PREVIOUS_DEPOSITS_FALLBACK)
    penalty = defaulted_deposits * DEFAULTED_DEPOSIT_PENALTY
    return FactorResult(
        "depositExperience",
        f"{previous_deposits} previous, {defaulted_deposits} defaulted",
        f"{label_at_least(previous_deposits, PREVIOUS_DEPOSITS_TABLE)}, -{penalty} penalty",
        cap(base - penalty, DEPOSIT_EXPERIENCE_MAX),
        DEPOSIT_EXPERIENCE_MAX,
    )
