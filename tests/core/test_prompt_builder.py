"""
Test suite for PromptBuilder.

Verifies message layout, the user instruction text and the strict
json_schema response format.

System role: Verification of completion request construction
"""

from dataroom.core.document_analysis.llm import DEFAULT_MODEL, PromptBuilder
from dataroom.core.document_analysis.llm.analysis_prompt import SYSTEM_PROMPT

EXPECTED_PROPERTIES = {
    "summary",
    "keywords",
    "categories",
    "tags",
    "keyInsights",
    "toneAndStyle",
    "targetAudience",
    "potentialApplications",
}


class TestPromptBuilderBuild:
    """Test suite for PromptBuilder.build()."""

    def test_build_should_use_system_persona_then_user_instruction(self) -> None:
        request = PromptBuilder().build("Deck.pdf", "Revenue grew 40%")

        assert [m.role for m in request.messages] == ["system", "user"]
        assert request.messages[0].content == SYSTEM_PROMPT

    def test_user_message_should_embed_title_and_chunk(self) -> None:
        request = PromptBuilder().build("Deck.pdf", "Revenue grew 40%")
        user = request.messages[1].content

        assert user.startswith('Analyze the following part of the document titled "Deck.pdf":\n\nRevenue grew 40%.')
        assert "no more than 2-3 sentences" in user

    def test_response_format_should_be_strict_json_schema(self) -> None:
        fmt = PromptBuilder().build("t", "c").response_format

        assert fmt["type"] == "json_schema"
        assert fmt["json_schema"]["name"] == "document_analysis"
        assert fmt["json_schema"]["strict"] is True

        schema = fmt["json_schema"]["schema"]
        assert set(schema["required"]) == EXPECTED_PROPERTIES
        assert set(schema["properties"]) == EXPECTED_PROPERTIES
        assert schema["additionalProperties"] is False

        keyword_item = schema["properties"]["keywords"]["items"]
        assert keyword_item["additionalProperties"] is False
        assert set(keyword_item["required"]) == {"word", "explanation"}

    def test_build_should_be_pure(self) -> None:
        builder = PromptBuilder()
        first = builder.build("t", "c")
        first.response_format["json_schema"]["schema"]["properties"].clear()

        second = builder.build("t", "c")
        assert set(second.response_format["json_schema"]["schema"]["properties"]) == EXPECTED_PROPERTIES

    def test_model_should_default_and_be_overridable(self) -> None:
        assert PromptBuilder().build("t", "c").model == DEFAULT_MODEL
        assert PromptBuilder(model="gpt-4o-mini").build("t", "c").to_payload()["model"] == "gpt-4o-mini"
