from chat_websearch.config.websearch import DEFAULT_INSERTION_TEMPLATE, PromptPosition
from chat_websearch.injection import SLOT_ID, InMemoryPromptSlots, PromptInjector, PromptSlot
from chat_websearch.prompting import (
    ensure_text_placeholder,
    macro_substituter,
    render_insertion,
    substitute_macros,
)


class TestRenderInsertion:
    def test_default_template(self):
        rendered = render_insertion(DEFAULT_INSERTION_TEMPLATE, query="who is ada", text="Ada Lovelace\n")

        assert rendered == "***\nRelevant information from the web (who is ada):\nAda Lovelace\n\n***"

    def test_missing_text_placeholder_is_appended(self):
        assert ensure_text_placeholder("Results for {{query}}") == "Results for {{query}}\n{{text}}"
        assert render_insertion("Results for {{query}}", query="q", text="found") == "Results for q\nfound"

    def test_placeholders_are_case_insensitive(self):
        assert render_insertion("{{Query}}: {{TEXT}}", query="q", text="t") == "q: t"

    def test_empty_template_uses_default(self):
        assert ensure_text_placeholder("") == DEFAULT_INSERTION_TEMPLATE

    def test_substituted_text_is_not_rescanned(self):
        rendered = render_insertion("{{query}} -> {{text}}", query="q", text="literal {{query}}")

        assert rendered == "q -> literal {{query}}"


class TestMacros:
    def test_known_macros_are_replaced_and_unknown_kept(self):
        assert substitute_macros("Hi {{User}}, {{ char }} and {{unknown}}", {"user": "Ann", "char": "Bot"}) == (
            "Hi Ann, Bot and {{unknown}}"
        )

    def test_macro_substituter_is_reusable(self):
        substitute = macro_substituter({"user": "Ann"})

        assert substitute("{{user}}") == "Ann"


class TestPromptInjector:
    def test_inject_writes_fixed_slot_with_position_and_depth(self):
        slots = InMemoryPromptSlots()
        injector = PromptInjector(slots, macro_substituter({"user": "Ann"}))

        content = injector.inject(
            query="q",
            text="result",
            template="{{user}} asked {{query}}",
            position=PromptPosition.IN_CHAT,
            depth=4,
        )

        assert content == "Ann asked q\nresult"
        assert slots.get(SLOT_ID) == PromptSlot(content=content, position=PromptPosition.IN_CHAT, depth=4)

    def test_later_write_replaces_earlier_one(self):
        slots = InMemoryPromptSlots()
        injector = PromptInjector(slots)
        injector.inject(query="q", text="t", template="{{text}}", position=PromptPosition.AFTER_MAIN, depth=2)
        injector.clear(PromptPosition.AFTER_MAIN, 2)

        assert slots.content() == ""
        assert len(slots.writes) == 2
