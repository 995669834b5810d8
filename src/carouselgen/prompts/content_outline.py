"""Stage 1 prompt: the carousel's text content, slide by slide.

German and English variants are kept side by side; each carries a worked
example outline so the model sees the expected slide-type rhythm (hook first,
cta last, varied types in between).
"""

from __future__ import annotations

from .base import PromptPair, join_sections

_STYLE_DESCRIPTIONS = {
    "professional": {
        "de": "Professionell und business-orientiert. Klare, prägnante Aussagen. Fokus auf Mehrwert und Expertise.",
        "en": "Professional and business-oriented. Clear, concise statements. Focus on value and expertise.",
    },
    "casual": {
        "de": "Locker und nahbar. Konversationeller Ton. Persönliche Ansprache.",
        "en": "Casual and approachable. Conversational tone. Personal address.",
    },
    "educational": {
        "de": "Lehrreich und informativ. Strukturierte Wissensvermittlung. Klare Schritte.",
        "en": "Educational and informative. Structured knowledge transfer. Clear steps.",
    },
    "inspirational": {
        "de": "Inspirierend und motivierend. Emotionale Ansprache. Mutige Aussagen.",
        "en": "Inspiring and motivating. Emotional appeal. Bold statements.",
    },
}

_INTRO = {
    "de": (
        "Du bist ein erfahrener Content-Stratege für Social-Media-Carousels. "
        "Du erstellst strukturierte Content-Outlines, die fesseln und zum Engagement anregen."
    ),
    "en": (
        "You are an experienced content strategist for social media carousels. "
        "You write structured content outlines that captivate readers and invite engagement."
    ),
}

_SLIDE_TYPES = {
    "de": """SLIDE-TYPEN:
- "hook": Erster Slide. Erregt Aufmerksamkeit mit einer Frage, Überraschung oder These.
- "content": Headline mit erklärendem Body-Text.
- "list": Headline mit 3-5 Aufzählungspunkten.
- "quote": Zitat oder Statistik mit Quelle.
- "cta": Letzter Slide. Fordert zum Handeln auf.""",
    "en": """SLIDE TYPES:
- "hook": First slide. Grabs attention with a question, surprise or bold claim.
- "content": Headline with explanatory body text.
- "list": Headline with 3-5 bullet points.
- "quote": A quote or statistic with its source.
- "cta": Last slide. Asks the reader to act.""",
}

_RULES = {
    "de": """REGELN:
1. Der ERSTE Slide ist vom Typ "hook"
2. Der LETZTE Slide ist vom Typ "cta"
3. Variiere die Typen dazwischen
4. Headlines sind kurz (max. 10 Wörter)
5. Body-Text ist konkret und verständlich
6. Listen haben 3-5 kurze, scanbare Punkte
7. Nutze 1-2 passende Emojis pro Slide
8. Nicht benötigte Felder sind null""",
    "en": """RULES:
1. The FIRST slide is type "hook"
2. The LAST slide is type "cta"
3. Vary the types in between
4. Headlines are short (max 10 words)
5. Body text is concrete and easy to follow
6. Lists have 3-5 short, scannable points
7. Use 1-2 fitting emojis per slide
8. Fields a slide does not need are null""",
}

_EXAMPLES = {
    "de": """BEISPIEL - Thema: "5 Tipps für besseres Zeitmanagement"
{
  "title": "Zeitmanagement meistern",
  "slides": [
    {"type": "hook", "headline": "⏰ Arbeitest du hart oder smart?", "subheadline": "5 Strategien, die alles verändern"},
    {"type": "content", "headline": "1. Die 2-Minuten-Regel ⚡", "body": "Dauert eine Aufgabe unter 2 Minuten, erledige sie sofort."},
    {"type": "list", "headline": "2. Die Eisenhower-Matrix 📊", "bullets": ["🔴 Wichtig + dringend → sofort", "🟡 Wichtig → planen", "🟠 Dringend → delegieren", "⚪ Weder noch → streichen"]},
    {"type": "quote", "headline": "📈 Was die Forschung sagt", "quote": "Multitasking senkt die Produktivität um bis zu 40%.", "attribution": "American Psychological Association"},
    {"type": "cta", "headline": "🚀 Bereit für mehr Fokus?", "body": "Starte heute mit einer Strategie.", "cta": "Folge für mehr Tipps →"}
  ]
}""",
    "en": """EXAMPLE - Topic: "5 Tips for Better Time Management"
{
  "title": "Master Time Management",
  "slides": [
    {"type": "hook", "headline": "⏰ Are you working hard or smart?", "subheadline": "5 strategies that change everything"},
    {"type": "content", "headline": "1. The 2-Minute Rule ⚡", "body": "If a task takes less than 2 minutes, do it right away."},
    {"type": "list", "headline": "2. The Eisenhower Matrix 📊", "bullets": ["🔴 Important + urgent → do now", "🟡 Important → schedule", "🟠 Urgent → delegate", "⚪ Neither → drop"]},
    {"type": "quote", "headline": "📈 What research says", "quote": "Multitasking can cut productivity by up to 40%.", "attribution": "American Psychological Association"},
    {"type": "cta", "headline": "🚀 Ready to focus?", "body": "Start today with just one strategy.", "cta": "Follow for more tips →"}
  ]
}""",
}


def build_content_outline_prompt(
    topic: str,
    style: str,
    slide_count: int,
    language: str,
) -> PromptPair:
    """Build the content outline prompt.

    Args:
        topic: Carousel topic as entered by the user.
        style: One of the four carousel styles.
        slide_count: Number of slides the outline must contain.
        language: ``"de"`` or ``"en"``; selects the prompt language.

    Returns:
        PromptPair whose user message names the topic and slide count.
    """
    style_label = "STIL" if language == "de" else "STYLE"
    system = join_sections(
        _INTRO[language],
        f"{style_label}: {_STYLE_DESCRIPTIONS[style][language]}",
        _SLIDE_TYPES[language],
        _RULES[language],
        _EXAMPLES[language],
    )

    if language == "de":
        user = f'Erstelle einen Content-Outline für ein {slide_count}-Slide-Carousel über: "{topic}"'
    else:
        user = f'Create a content outline for a {slide_count}-slide carousel about: "{topic}"'
    return PromptPair(system, user)
