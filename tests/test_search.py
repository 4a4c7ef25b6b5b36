"""测试模糊搜索入口。"""

import unittest
from dataclasses import dataclass
from unittest import mock

from smart_fuzzy import (
    SearchOptions,
    all_match_results,
    all_matches,
    best_match,
    best_match_result,
)
from smart_fuzzy.heuristics import char_set_jaccard


@dataclass
class City:
    name: str
    province: str = ""


class TestBestMatch(unittest.TestCase):
    """测试 best_match。"""

    def setUp(self):
        self.cities = [
            {"name": "北京市"},
            {"name": "北京"},
            {"name": "南京市"},
            {"name": "天津"},
        ]

    def test_exact_match_wins(self):
        self.assertEqual(best_match(self.cities, "name", "北京"), {"name": "北京"})

    def test_exact_match_score(self):
        result = best_match_result([{"name": "北京市"}], "name", "北京市")
        self.assertIsNotNone(result)
        self.assertEqual(result.item, {"name": "北京市"})
        self.assertEqual(result.score, 1.0)
        self.assertTrue(result.details.exact_match)
        self.assertTrue(result.details.prefix_match)
        self.assertTrue(result.details.contains_match)

    def test_single_char_term_rejected(self):
        """归一化后不足 2 个字符的搜索词直接返回 None。"""
        people = [{"name": "张三"}, {"name": "李四"}]
        self.assertIsNone(best_match(people, "name", "张"))
        self.assertIsNone(best_match(people, "name", "张", {"min_score": 0.0}))

    def test_high_threshold_returns_none(self):
        self.assertIsNone(
            best_match([{"name": "深圳市"}], "name", "x", SearchOptions(min_score=0.9))
        )
        self.assertIsNone(
            best_match([{"name": "深圳市"}], "name", "深圳", SearchOptions(min_score=0.9))
        )

    def test_prefix_match(self):
        self.assertEqual(
            best_match([{"name": "上海"}, {"name": "北京市"}], "name", "北京"),
            {"name": "北京市"},
        )

    def test_object_items(self):
        cities = [City(name="广州市"), City(name="杭州市")]
        self.assertEqual(best_match(cities, "name", "杭州"), cities[1])

    def test_generator_collection(self):
        items = ({"name": n} for n in ["天津", "北京"])
        self.assertEqual(best_match(items, "name", "北京"), {"name": "北京"})

    def test_case_insensitive_by_default(self):
        items = [{"name": "Hello World"}, {"name": "Goodbye"}]
        expected = {"name": "Hello World"}
        for term in ("hello", "HELLO", "HeLLo"):
            with self.subTest(term=term):
                self.assertEqual(best_match(items, "name", term), expected)

    def test_case_permutations_score_equal(self):
        scores = {
            best_match_result([{"name": value}], "name", term).score
            for value in ("Hello World", "HELLO WORLD", "hello world")
            for term in ("hello", "HELLO", "HeLLo")
        }
        self.assertEqual(len(scores), 1)

    def test_length_prefilter(self):
        result = best_match_result(
            [{"name": "北京" + "x" * 25}], "name", "北京", {"min_score": 0.0}
        )
        self.assertEqual(result.score, 0.0)

    def test_weight_override(self):
        result = best_match_result(
            [{"name": "北京市"}], "name", "北京市", {"weightConfig": {"exactMatch": 0.5}}
        )
        self.assertEqual(result.score, 0.5)
        self.assertIsNone(
            best_match(
                [{"name": "北京市"}],
                "name",
                "北京市",
                {"min_score": 0.6, "weight_config": {"exact_match": 0.5}},
            )
        )

    def test_missing_field_scores_zero(self):
        items = [{"title": "北京"}, {"name": "北京市"}]
        self.assertEqual(best_match(items, "name", "北京"), {"name": "北京市"})

    def test_ties_resolved_by_original_order(self):
        items = [{"name": "北京市", "id": 1}, {"name": "北京市", "id": 2}]
        self.assertEqual(best_match(items, "name", "北京")["id"], 1)

    def test_cache_avoids_recomputation(self):
        items = [{"name": "北京市"}] * 3
        with mock.patch(
            "smart_fuzzy.aggregator.char_set_jaccard", wraps=char_set_jaccard
        ) as jaccard:
            best_match(items, "name", "北京")
        self.assertEqual(jaccard.call_count, 1)

    def test_cache_disabled(self):
        items = [{"name": "北京市"}] * 3
        with mock.patch(
            "smart_fuzzy.aggregator.char_set_jaccard", wraps=char_set_jaccard
        ) as jaccard:
            result = best_match(items, "name", "北京", {"enable_cache": False})
        self.assertEqual(jaccard.call_count, 3)
        self.assertEqual(result, {"name": "北京市"})

    def test_cache_not_shared_between_calls(self):
        items = [{"name": "北京市"}]
        with mock.patch(
            "smart_fuzzy.aggregator.char_set_jaccard", wraps=char_set_jaccard
        ) as jaccard:
            best_match(items, "name", "北京")
            best_match(items, "name", "北京")
        self.assertEqual(jaccard.call_count, 2)


class TestAllMatches(unittest.TestCase):
    """测试 all_matches。"""

    def setUp(self):
        self.cities = [
            {"name": "南京市"},
            {"name": "北京市"},
            {"name": "天津"},
            {"name": "北京"},
        ]

    def test_sorted_and_filtered(self):
        self.assertEqual(
            all_matches(self.cities, "name", "北京"),
            [{"name": "北京"}, {"name": "北京市"}],
        )

    def test_single_char_term_allowed(self):
        """全部匹配没有搜索词长度门槛。"""
        people = [{"name": "张三"}, {"name": "李四"}]
        self.assertEqual(all_matches(people, "name", "张"), [{"name": "张三"}])

    def test_scores_non_increasing(self):
        results = all_match_results(self.cities, "name", "北京", {"min_score": 0.0})
        self.assertEqual(len(results), 4)
        for i in range(len(results) - 1):
            self.assertGreaterEqual(results[i].score, results[i + 1].score)

    def test_threshold(self):
        for min_score in (0.0, 0.1, 0.3, 0.7, 0.9):
            with self.subTest(min_score=min_score):
                results = all_match_results(
                    self.cities, "name", "北京", {"min_score": min_score}
                )
                self.assertTrue(all(r.score >= min_score for r in results))

    def test_word_matches_reported(self):
        results = all_match_results(
            [{"name": "new york city"}], "name", "york ci", {"min_score": 0.0}
        )
        self.assertEqual(results[0].details.word_matches, 2)

    def test_ignores_best_match_only_options(self):
        """enable_cache 与 max_edit_distance 对全部匹配无效。"""
        items = [{"name": "北京" + "x" * 25}]
        self.assertEqual(
            all_matches(items, "name", "北京", {"max_edit_distance": 0}), items
        )

    def test_no_match(self):
        self.assertEqual(all_matches(self.cities, "name", "广州深圳", {"min_score": 0.9}), [])


class TestInputGuards(unittest.TestCase):
    """测试输入校验：非法输入返回 None 或空列表。"""

    def test_invalid_collections(self):
        for collection in (None, 42, "北京市", b"abc", {"name": "北京"}):
            with self.subTest(collection=collection):
                self.assertIsNone(best_match(collection, "name", "北京"))
                self.assertEqual(all_matches(collection, "name", "北京"), [])

    def test_empty_collection(self):
        self.assertIsNone(best_match([], "name", "北京"))
        self.assertEqual(all_matches([], "name", "北京"), [])

    def test_missing_field(self):
        items = [{"name": "北京"}]
        self.assertIsNone(best_match(items, "", "北京"))
        self.assertIsNone(best_match(items, None, "北京"))
        self.assertEqual(all_matches(items, "", "北京"), [])

    def test_empty_search_term(self):
        items = [{"name": "北京"}]
        self.assertIsNone(best_match(items, "name", ""))
        self.assertIsNone(best_match(items, "name", None))
        self.assertEqual(all_matches(items, "name", ""), [])

    def test_guard_failure_logged(self):
        with self.assertLogs("smart_fuzzy.search", level="DEBUG") as logs:
            best_match(None, "name", "北京")
        self.assertIn("invalid_input", logs.output[0])

    def test_totality(self):
        """各种输入组合都不抛出异常。"""
        collections = [
            [],
            [{"name": ""}, {"name": None}, {"name": 0}, {}],
            [{"name": "北京市"}, {"name": "ＡＢＣ"}, {"name": "a,b.c，d。e"}],
            [City(name="上海"), {"name": "上海"}, object()],
        ]
        terms = ["", "a", "北京", "  ", ",,", "a" * 50, "ÄÖÜ", "北 京。市"]
        for collection in collections:
            for term in terms:
                with self.subTest(collection=collection, term=term):
                    best_match(collection, "name", term)
                    all_matches(collection, "name", term)


if __name__ == "__main__":
    unittest.main()
