"""
Document analysis prompt and structured-output schema.

Defines the analyst persona, the per-chunk user instruction and the strict
json_schema the completion service must answer with.

Dependencies: None
System role: Prompt template for chunk analysis
"""

SCHEMA_NAME = "document_analysis"

SYSTEM_PROMPT = (
    "You are an expert document analyst with deep knowledge across various domains. "
    "Your task is to analyze the given document comprehensively and accurately."
)

USER_PROMPT_TEMPLATE = (
    'Analyze the following part of the document titled "{document_title}":\n\n'
    "{chunk_text}. Please provide a very concise summary (no more than 2-3 sentences) "
    "focusing only on the key points without repetition."
)


def _string_list(description: str) -> dict:
    return {"type": "array", "items": {"type": "string"}, "description": description}


DOCUMENT_ANALYSIS_SCHEMA: dict = {
    "type": "object",
    "properties": {
        "summary": {
            "type": "string",
            "description": (
                "A very concise summary of the document in 2-3 sentences, "
                "focusing only on the key points without repetition."
            ),
        },
        "keywords": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "word": {"type": "string"},
                    "explanation": {"type": "string"},
                },
                "required": ["word", "explanation"],
                "additionalProperties": False,
            },
            "description": "5-7 most important keywords or phrases with explanations",
        },
        "categories": _string_list("2-3 main categories that best describe the document content"),
        "tags": _string_list("5-7 related tags for indexing or searching the document"),
        "keyInsights": _string_list("3-5 key insights or points derived from the document"),
        "toneAndStyle": {
            "type": "string",
            "description": "A brief description of the document's tone and style",
        },
        "targetAudience": {
            "type": "string",
            "description": "Identification of the expected target audience for this document",
        },
        "potentialApplications": _string_list(
            "2-3 potential applications or use cases for the information in this document"
        ),
    },
    "required": [
        "summary",
        "keywords",
        "categories",
        "tags",
        "keyInsights",
        "toneAndStyle",
        "targetAudience",
        "potentialApplications",
    ],
    "additionalProperties": False,
}
