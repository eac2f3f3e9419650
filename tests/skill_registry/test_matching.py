from skill_registry.matching import MIN_SCORE, rank_candidates, similarity


class TestSimilarity:
    def test_identical_names_score_one(self):
        assert similarity("brainstorming", "brainstorming") == 1.0

    def test_ignores_case(self):
        assert similarity("TDD", "tdd") == 1.0

    def test_token_overlap_counts(self):
        # 토큰 순서가 바뀌어도 높은 점수
        assert similarity("review-code", "code-review") == 1.0

    def test_unrelated_names_score_low(self):
        assert similarity("brainstorming", "xyz") < MIN_SCORE


class TestRankCandidates:
    def test_orders_by_score_descending(self):
        ranked = rank_candidates("debuging", ["brainstorming", "debugging", "systematic-debugging"])

        assert [name for name, _ in ranked][:2] == ["debugging", "systematic-debugging"]

    def test_caps_at_five(self):
        candidates = [f"testing-{letter}" for letter in "abcdefg"]

        ranked = rank_candidates("testng", candidates)

        assert len(ranked) == 5

    def test_ties_ordered_by_name(self):
        candidates = [f"testing-{letter}" for letter in "gfedcba"]

        ranked = rank_candidates("testng", candidates)

        assert [name for name, _ in ranked] == [f"testing-{letter}" for letter in "abcde"]

    def test_stable_across_runs(self):
        candidates = ["tdd", "tdd-extended", "testing-anti-patterns", "test-helpers", "debugging"]

        first = rank_candidates("tdd-ext", candidates)
        second = rank_candidates("tdd-ext", list(reversed(candidates)))

        assert first == second

    def test_drops_low_scores(self):
        assert rank_candidates("zzzz", ["brainstorming", "debugging"]) == []

    def test_empty_query(self):
        assert rank_candidates("", ["tdd"]) == []

    def test_no_candidates(self):
        assert rank_candidates("tdd", []) == []

    def test_unlimited(self):
        candidates = [f"testing-{letter}" for letter in "abcdefg"]

        assert len(rank_candidates("testng", candidates, limit=None)) == 7

    def test_duplicate_candidates_counted_once(self):
        ranked = rank_candidates("tdd", ["tdd", "tdd"])

        assert ranked == [("tdd", 1.0)]
