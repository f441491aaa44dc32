"""Persona response prompts: user content template, failure placeholder, sample queries."""
RESPONSE_USER_TEMPLATE = """User Context (use this to personalize your response):
{context}

User Query: "{query}"

Respond in character (2-4 paragraphs). Use the user context naturally to show you know them."""

RESPONSE_PLACEHOLDER = "I'm having trouble generating a response right now. Please try again."

SAMPLE_QUERIES = {
    "Stress": "I'm feeling overwhelmed with my project deadlines and don't know where to start.",
    "Career": "Should I ask my manager for a promotion this quarter?",
    "Habits": "How can I stick to a morning workout routine?",
    "Weekend": "What should I do this weekend to recharge?",
}
