"""
Unit tests for individual deposit scoring factors.
"""
from eligibility_engine.scoring.deposit_factors import (
    score_account_age,
    score_balance_history,
    score_consistency,
    score_deposit_experience,
    score_stability,
)


class TestBalanceHistory:
    def test_wealthy_account_capped(self):
        r = score_balance_history(current_balance=15_000, average_balance=8_000, max_balance=25_000)
        assert r.factor_name == "balanceHistory"
        assert r.points == 25  # 10 + 10 + 5

    def test_mid_balances(self):
        assert score_balance_history(5_000, 2_000, 10_000).points == 20  # 8 + 8 + 4
        assert score_balance_history(2_000, 1_000, 5_000).points == 15   # 6 + 6 + 3

    def test_small_balances(self):
        assert score_balance_history(500, 500, 0).points == 8            # 4 + 3 + 1

    def test_empty_account(self):
        assert score_balance_history(0, 0, 0).points == 3

    def test_negative_balance_falls_to_lowest(self):
        assert score_balance_history(-200, -50, 0).points == 3


class TestAccountAge:
    def test_buckets(self):
        assert score_account_age(60).points == 20
        assert score_account_age(36).points == 17
        assert score_account_age(24).points == 14
        assert score_account_age(12).points == 10
        assert score_account_age(6).points == 6
        assert score_account_age(3).points == 3

    def test_new_account(self):
        assert score_account_age(2).points == 1


class TestConsistency:
    def test_high_volume_low_variance(self):
        assert score_consistency(total_transactions=250, monthly_variance=1.5).points == 20

    def test_variance_is_lower_is_better(self):
        assert score_consistency(0, 2).points == 11    # 1 + 10
        assert score_consistency(0, 4).points == 9     # 1 + 8
        assert score_consistency(0, 6).points == 6     # 1 + 5
        assert score_consistency(0, 6.1).points == 3   # 1 + 2

    def test_volume_buckets(self):
        assert score_consistency(100, 10).points == 10  # 8 + 2
        assert score_consistency(50, 10).points == 7    # 5 + 2
        assert score_consistency(20, 10).points == 5    # 3 + 2

    def test_label_for_erratic_variance(self):
        r = score_consistency(10, 9)
        assert r.bin_label == "<20 total, variance >6"


class TestStability:
    def test_no_suspicious_activity(self):
        assert score_stability(months_active=48, suspicious_activity_count=0).points == 15

    def test_suspicious_activity_penalty(self):
        # 24 months active → 12, three incidents → -6
        assert score_stability(24, 3).points == 6

    def test_penalty_floored_at_zero(self):
        assert score_stability(24, 10).points == 0
        assert score_stability(0, 1).points == 0


class TestDepositExperience:
    def test_seasoned_depositor(self):
        assert score_deposit_experience(previous_deposits=6, defaulted_deposits=0).points == 12

    def test_default_penalty(self):
        assert score_deposit_experience(5, 1).points == 7   # 12 - 5
        assert score_deposit_experience(3, 1).points == 4   # 9 - 5

    def test_penalty_floored_at_zero(self):
        assert score_deposit_experience(1, 2).points == 0

    def test_first_timer(self):
        assert score_deposit_experience(0, 0).points == 1


class TestMonotonicity:
    def test_current_balance(self):
        points = [score_balance_history(v, 0, 0).points for v in range(0, 15_000, 250)]
        assert points == sorted(points)

    def test_previous_deposits(self):
        points = [score_deposit_experience(v, 0).points for v in range(0, 10)]
        assert points == sorted(points)

    def test_months_active(self):
        points = [score_stability(v, 0).points for v in range(0, 72)]
        assert points == sorted(points)
