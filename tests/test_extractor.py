import pytest

from chat_websearch.extraction import (
    UnknownAnswer,
    assemble,
    collect_fragments,
    extract,
    parse_answer_box,
)

BUDGET = 1500


class TestAnswerBoxVariants:
    @pytest.mark.parametrize(
        "answer_box, expected",
        [
            ({"type": "organic_result", "snippet": "s", "result": "r", "title": "t"}, ["s"]),
            ({"type": "organic_result", "result": "r", "title": "t"}, ["r"]),
            ({"type": "organic_result", "title": "t"}, ["t"]),
            (
                {"type": "translation_result", "translation": {"target": {"text": "hola"}}},
                ["hola"],
            ),
            ({"type": "translation_result", "translation": {}}, []),
            ({"type": "calculator_result", "result": "4"}, ["4"]),
            ({"type": "currency_converter", "result": "1 USD = 0.92 EUR"}, ["1 USD = 0.92 EUR"]),
            (
                {"type": "population_result", "place": "France", "population": "68 million"},
                ["France 68 million"],
            ),
            (
                {
                    "type": "finance_results",
                    "title": "Apple Inc",
                    "exchange": "NASDAQ",
                    "stock": "AAPL",
                    "price": 189.5,
                    "currency": "USD",
                },
                ["Apple Inc NASDAQ AAPL 189.5 USD"],
            ),
            (
                {
                    "type": "weather_result",
                    "location": "Paris",
                    "weather": "Sunny",
                    "temperature": "21",
                    "unit": "Celsius",
                },
                ["Paris Sunny 21 Celsius"],
            ),
            ({"type": "flight_duration", "duration": "7 h 25 min"}, ["7 h 25 min"]),
            (
                {"type": "dictionary_results", "definitions": ["first sense", "second sense"]},
                ["first sense\nsecond sense"],
            ),
            ({"type": "time", "result": "10:42 AM", "date": "Monday"}, ["10:42 AM Monday"]),
            ({"type": "something_new", "answer": "42", "title": "t"}, ["42"]),
            ({"title": "untyped"}, ["untyped"]),
        ],
    )
    def test_fragment_selection(self, answer_box, expected):
        assert parse_answer_box(answer_box).fragments() == expected

    def test_organic_list_and_table_become_extra_fragments(self):
        answer_box = {
            "type": "organic_result",
            "snippet": "Steps:",
            "list": ["Preheat", "Mix", "Bake"],
            "table": [["Flour", "200g"], ["Sugar", "100g"]],
        }

        assert parse_answer_box(answer_box).fragments() == [
            "Steps:",
            "Preheat\nMix\nBake",
            "Flour,200g\nSugar,100g",
        ]

    def test_missing_template_fields_are_left_out(self):
        answer_box = {"type": "population_result", "place": "Iceland"}

        assert parse_answer_box(answer_box).fragments() == ["Iceland"]

    def test_unknown_type_falls_back(self):
        assert isinstance(parse_answer_box({"type": 7, "result": "x"}), UnknownAnswer)

    def test_non_mapping_is_not_an_answer_box(self):
        assert parse_answer_box("nope") is None
        assert parse_answer_box(None) is None


class TestCollectFragments:
    def test_priority_order(self):
        payload = {
            "related_questions": [{"snippet": "related"}],
            "organic_results": [{"snippet": "organic"}],
            "knowledge_graph": {"title": "graph title", "description": "graph description"},
            "answer_box": {"type": "calculator_result", "result": "4"},
        }

        assert collect_fragments(payload) == ["4", "graph description", "organic", "related"]

    def test_only_first_five_results_are_used(self):
        payload = {
            "organic_results": [{"snippet": f"o{i}"} for i in range(8)],
            "related_questions": [{"snippet": f"r{i}"} for i in range(8)],
        }

        fragments = collect_fragments(payload)

        assert fragments == [f"o{i}" for i in range(5)] + [f"r{i}" for i in range(5)]

    def test_knowledge_graph_fallback_chain(self):
        assert collect_fragments({"knowledge_graph": {"merchant_description": "shop"}}) == ["shop"]

    def test_non_mapping_payload(self):
        assert collect_fragments(["not", "a", "payload"]) == []


class TestExtract:
    def test_answer_box_comes_before_organic_results(self):
        payload = {
            "answer_box": {"type": "calculator_result", "result": "4"},
            "organic_results": [{"snippet": "math site"}],
        }

        assert extract(payload, BUDGET) == "4\nmath site\n"

    def test_missing_snippets_add_no_blank_lines(self):
        payload = {"organic_results": [{"title": "no snippet"}, {"snippet": "kept"}, {}]}

        assert extract(payload, BUDGET) == "kept\n"

    def test_budget_is_a_soft_cap(self):
        payload = {"organic_results": [{"snippet": "abcdef"}, {"snippet": "ghij"}]}

        assert extract(payload, 5) == "abcdef\n"

    def test_fragment_may_overshoot_budget(self):
        assert assemble(["abc", "defghijkl", "mno"], 6) == "abc\ndefghijkl\n"

    def test_zero_budget_keeps_first_fragment(self):
        assert assemble([None, "", "first", "second"], 0) == "first\n"

    def test_empty_payload_yields_none(self):
        assert extract({}, BUDGET) is None
        assert extract({"organic_results": [{"snippet": ""}]}, BUDGET) is None
