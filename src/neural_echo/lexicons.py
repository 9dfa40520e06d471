"""Fixed, hand-authored word tables used by the scorers.

Every table is checked once at import; a malformed table raises
:class:`~neural_echo.errors.ConfigurationError` instead of silently degrading
the scores.
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, Mapping, Pattern, Tuple

from .errors import ConfigurationError
from .models import ConceptCategory, Emotion

# Emotion lexicon --------------------------------------------------------------
_EMOTION_WORDS: Tuple[Tuple[Emotion, float, Tuple[str, ...]], ...] = (
    (
        Emotion.JOY,
        0.8,
        (
            "happy", "joy", "excited", "wonderful", "amazing", "brilliant", "delighted", "ecstatic",
            "joyful", "cheerful", "elated", "euphoric", "blissful", "content", "pleased", "satisfied",
            "thrilled", "overjoyed", "gleeful", "merry", "upbeat", "optimistic", "positive", "bright",
            "fantastic", "great", "excellent", "perfect", "beautiful", "love", "adore", "celebrate",
            "triumph", "victory", "success", "achievement", "accomplishment", "pride", "confident",
            "hope", "hopeful", "inspiring", "motivated", "energetic", "vibrant", "alive",
        ),
    ),
    (
        Emotion.SADNESS,
        0.8,
        (
            "sad", "depressed", "gloomy", "melancholy", "disappointed", "sorrowful", "grief",
            "heartbroken", "devastated", "dejected", "despondent", "downhearted", "miserable",
            "unhappy", "blue", "down", "low", "morose", "mournful", "woeful", "tearful",
            "crying", "weeping", "sobbing", "lonely", "isolated", "abandoned", "lost",
            "hopeless", "helpless", "despair", "anguish", "pain", "hurt", "suffering",
            "regret", "remorse", "guilt", "shame", "burden", "heavy", "dark",
        ),
    ),
    (
        Emotion.ANGER,
        0.8,
        (
            "angry", "furious", "rage", "hostile", "irritated", "annoyed", "outraged",
            "mad", "livid", "enraged", "irate", "incensed", "wrathful", "fuming",
            "aggravated", "frustrated", "exasperated", "indignant", "resentful", "bitter",
            "hatred", "hate", "loathe", "despise", "disgusted", "revolted", "appalled",
            "offended", "insulted", "provoked", "triggered", "agitated", "upset",
            "pissed", "ticked", "steamed", "boiling", "seething", "explosive",
        ),
    ),
    (
        Emotion.FEAR,
        0.8,
        (
            "afraid", "terrified", "anxious", "worried", "nervous", "scared", "frightened",
            "fearful", "panicked", "horrified", "petrified", "trembling", "shaking",
            "paranoid", "concerned", "uneasy", "apprehensive", "dreadful", "ominous",
            "threatening", "dangerous", "risky", "uncertain", "insecure", "vulnerable",
            "stressed", "tense", "overwhelmed", "panic", "terror", "horror", "nightmare",
            "phobia", "anxiety", "stress", "pressure", "burden", "threat",
        ),
    ),
    (
        Emotion.SURPRISE,
        0.7,
        (
            "surprised", "shocked", "astonished", "amazed", "stunned", "startled",
            "bewildered", "perplexed", "confused", "puzzled", "baffled", "mystified",
            "unexpected", "sudden", "abrupt", "unforeseen", "remarkable", "extraordinary",
            "incredible", "unbelievable", "astounding", "wow", "whoa",
            "gasped", "speechless", "thunderstruck", "flabbergasted", "dumbfounded",
        ),
    ),
    (
        Emotion.ANTICIPATION,
        0.6,
        (
            "excited", "eager", "hopeful", "optimistic", "expecting", "anticipating",
            "awaiting", "prepared", "ready", "planning", "future",
            "tomorrow", "soon", "upcoming", "approaching", "imminent", "pending",
            "prospect", "possibility", "potential", "opportunity", "chance", "maybe",
            "curious", "interested", "intrigued", "wondering", "expectant",
        ),
    ),
)


def _build_emotion_lexicon() -> Dict[str, Tuple[Emotion, float]]:
    # later lists overwrite earlier ones for shared words ("excited" -> anticipation)
    lexicon: Dict[str, Tuple[Emotion, float]] = {}
    for emotion, intensity, words in _EMOTION_WORDS:
        for word in words:
            lexicon[word] = (emotion, intensity)
    return lexicon


EMOTION_LEXICON: Mapping[str, Tuple[Emotion, float]] = _build_emotion_lexicon()

NEGATION_WORDS: FrozenSet[str] = frozenset(
    {
        "not", "no", "never", "none", "nothing", "nobody", "nowhere",
        "neither", "nor", "without", "barely", "hardly", "scarcely", "seldom",
    }
)

INTENSIFIERS: Mapping[str, float] = {
    "very": 1.5,
    "extremely": 2.0,
    "incredibly": 1.8,
    "absolutely": 1.7,
    "completely": 1.6,
    "totally": 1.5,
    "really": 1.3,
    "quite": 1.2,
    "rather": 1.1,
    "somewhat": 0.8,
    "slightly": 0.6,
    "barely": 0.4,
    "utterly": 1.9,
    "exceptionally": 1.8,
    "remarkably": 1.6,
    "particularly": 1.4,
}

# Emoji ------------------------------------------------------------------------
EMOJI_PATTERN: Pattern[str] = re.compile(
    "[\U0001F600-\U0001F64F"
    "\U0001F300-\U0001F5FF"
    "\U0001F680-\U0001F6FF"
    "\U0001F1E0-\U0001F1FF"
    "\U0001F900-\U0001F9FF"
    "\U0001FA70-\U0001FAFF"
    "☀-⛿"
    "✀-➿]"
)

_EMOJI_GROUPS: Tuple[Tuple[Emotion, float, str], ...] = (
    (Emotion.JOY, 0.8, "😊😄😃😀🙂😌😍🥰😘😆😂🤣😇"),
    (Emotion.SADNESS, 0.8, "😢😭😞😔😟🙁☹😕😿💔"),
    (Emotion.ANGER, 0.9, "😠😡🤬😤👿💢"),
    (Emotion.FEAR, 0.7, "😨😱😰😧😦😮😯🫨"),
    (Emotion.SURPRISE, 0.6, "😲😳🤯😵🫢"),
)

EMOJI_EMOTIONS: Mapping[str, Tuple[Emotion, float]] = {
    emoji: (emotion, intensity) for emotion, intensity, emojis in _EMOJI_GROUPS for emoji in emojis
}
UNKNOWN_EMOJI: Tuple[Emotion, float] = (Emotion.ANTICIPATION, 0.3)

EMOTION_POLARITY: Mapping[Emotion, float] = {
    Emotion.JOY: 1.0,
    Emotion.ANTICIPATION: 0.5,
    Emotion.SURPRISE: 0.2,
    Emotion.SADNESS: -0.8,
    Emotion.ANGER: -0.9,
    Emotion.FEAR: -0.7,
}

# Concept categories -----------------------------------------------------------
STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
        "by", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
        "will", "would", "could", "should", "may", "might", "must", "can", "shall",
        "this", "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
        "me", "him", "her", "us", "them", "my", "your", "his", "its", "our", "their",
        "what", "which", "who", "whom", "whose", "where", "when", "why", "how",
        "if", "then", "else", "so", "as", "than", "too", "very", "much", "many",
        "some", "any", "all", "each", "every", "both", "either", "neither",
    }
)

CATEGORY_KEYWORDS: Mapping[ConceptCategory, FrozenSet[str]] = {
    ConceptCategory.EMOTION: frozenset(
        {
            "happiness", "sadness", "anger", "fear", "surprise", "disgust", "joy", "love",
            "excitement", "nervousness", "anxiety", "peace", "stress", "worry", "confidence",
            "hope", "disappointment", "frustration", "contentment", "loneliness", "gratitude",
        }
    ),
    ConceptCategory.TIME: frozenset(
        {
            "morning", "afternoon", "evening", "night", "yesterday", "today", "tomorrow",
            "moment", "instant", "period", "duration", "schedule", "deadline", "appointment",
            "meeting", "event", "occasion", "anniversary", "birthday", "holiday", "vacation",
        }
    ),
    ConceptCategory.PEOPLE: frozenset(
        {
            "relationship", "friendship", "partnership", "marriage", "romance", "dating",
            "conversation", "communication", "interaction", "connection", "bond", "trust",
            "support", "care", "respect", "understanding", "empathy", "kindness",
        }
    ),
    ConceptCategory.PLACES: frozenset(
        {
            "location", "destination", "journey", "travel", "exploration", "adventure",
            "environment", "atmosphere", "scenery", "landscape", "architecture", "design",
            "space", "area", "region", "territory", "boundary", "distance", "proximity",
        }
    ),
    ConceptCategory.ACTIONS: frozenset(
        {
            "activity", "behavior", "performance", "execution", "implementation", "practice",
            "exercise", "training", "skill", "ability", "talent", "expertise", "experience",
            "effort", "attempt", "try", "struggle", "fight", "compete", "collaborate",
        }
    ),
    ConceptCategory.ABSTRACT: frozenset(
        {
            "concept", "principle", "theory", "hypothesis", "assumption", "belief", "opinion",
            "perspective", "viewpoint", "attitude", "approach", "method", "strategy", "plan",
            "goal", "objective", "purpose", "meaning", "significance", "importance", "value",
        }
    ),
    ConceptCategory.OBJECTS: frozenset(
        {
            "device", "equipment", "instrument", "machine", "appliance", "gadget", "technology",
            "material", "substance", "product", "creation", "invention", "structure",
            "system", "component", "element", "feature", "characteristic", "property",
        }
    ),
}


def _alternation(*words: str) -> Pattern[str]:
    return re.compile("|".join(words), re.IGNORECASE)


CATEGORY_PATTERNS: Mapping[ConceptCategory, Pattern[str]] = {
    ConceptCategory.EMOTION: _alternation(
        "emotional", "feeling", "mood", "happy", "sad", "angry", "fear", "joy", "love", "hate",
        "excited", "nervous", "calm", "stressed", "peaceful", "worried", "confident", "anxious",
        "hopeful", "disappointed",
    ),
    ConceptCategory.TIME: _alternation(
        "time", "day", "night", "morning", "evening", "afternoon", "yesterday", "today",
        "tomorrow", "now", "then", "when", "before", "after", "during", "while", "moment", "hour",
        "minute", "second", "week", "month", "year", "future", "past", "present", "recently",
        "soon", "later", "early", "late",
    ),
    ConceptCategory.PEOPLE: _alternation(
        "person", "people", "friend", "family", "someone", "everyone", "nobody", "mother",
        "father", "parent", "child", "son", "daughter", "brother", "sister", "colleague",
        "teammate", "neighbor", "stranger", "community", "group", "individual", "human", "man",
        "woman", "boy", "girl", "adult", "baby", "elder",
    ),
    ConceptCategory.PLACES: _alternation(
        "place", "home", "house", "school", "work", "office", "city", "town", "country", "world",
        "room", "kitchen", "bedroom", "bathroom", "garden", "park", "street", "road", "building",
        "store", "restaurant", "hospital", "church", "library", "museum", "beach", "mountain",
        "forest", "lake", "river", "university", "college",
    ),
    ConceptCategory.ACTIONS: _alternation(
        "do", "did", "doing", "done", "run", "walk", "think", "create", "build", "make", "write",
        "read", "speak", "listen", "see", "watch", "look", "go", "come", "move", "stop", "start",
        "finish", "begin", "end", "work", "play", "learn", "teach", "help", "give", "take",
        "bring", "send", "receive", "buy", "sell", "eat", "drink", "sleep", "wake",
    ),
    ConceptCategory.ABSTRACT: _alternation(
        "idea", "concept", "thought", "dream", "hope", "belief", "philosophy", "theory",
        "principle", "value", "meaning", "purpose", "goal", "plan", "strategy", "solution",
        "problem", "challenge", "opportunity", "success", "failure", "progress", "change",
        "growth", "development", "improvement", "achievement", "experience", "memory",
        "knowledge", "wisdom", "understanding", "truth", "justice", "freedom", "creativity",
        "innovation", "inspiration", "motivation", "determination",
    ),
    ConceptCategory.OBJECTS: _alternation(
        "thing", "object", "item", "tool", "car", "bike", "phone", "computer", "laptop", "book",
        "paper", "pen", "table", "chair", "bed", "door", "window", "light", "food", "water",
        "money", "clothes", "shoes", "bag", "camera", "music", "movie", "game", "toy", "gift",
        "key", "lock", "box", "bottle", "cup", "plate", "spoon", "fork", "knife",
    ),
}

CATEGORY_SUFFIXES: Tuple[Tuple[ConceptCategory, Tuple[str, ...]], ...] = (
    (ConceptCategory.ACTIONS, ("ing", "ed")),
    (ConceptCategory.ABSTRACT, ("ness", "ity", "ism")),
    (ConceptCategory.PEOPLE, ("er", "or", "ian")),
)

CATEGORY_IMPORTANCE: Mapping[ConceptCategory, float] = {
    ConceptCategory.EMOTION: 1.5,
    ConceptCategory.ABSTRACT: 1.3,
    ConceptCategory.PEOPLE: 1.2,
    ConceptCategory.ACTIONS: 1.1,
    ConceptCategory.TIME: 1.0,
    ConceptCategory.PLACES: 0.9,
    ConceptCategory.OBJECTS: 0.8,
}

# Complexity -------------------------------------------------------------------
COMMON_WORDS: FrozenSet[str] = frozenset(
    {
        "the", "a", "to", "and", "of", "in", "i", "you", "it", "have", "be", "on", "for", "do", "say",
        "this", "they", "is", "an", "at", "but", "we", "his", "from", "that", "not", "by", "she", "or",
        "as", "what", "go", "their", "can", "who", "get", "if", "would", "her", "all", "my", "make",
        "about", "know", "will", "up", "one", "time", "has", "been", "there", "year", "so",
        "think", "when", "which", "them", "some", "me", "people", "take", "out", "into", "just", "see",
        "him", "your", "come", "could", "now", "than", "like", "other", "how", "then", "its", "our",
        "two", "more", "these", "want", "way", "look", "first", "also", "new", "because", "day",
        "use", "no", "man", "find", "here", "thing", "give", "many", "well", "only", "those", "tell",
        "very", "even", "back", "any", "good", "woman", "through", "us", "life", "child", "work",
        "down", "may", "after", "should", "call", "world", "over", "school", "still", "try",
        "last", "ask", "need", "too", "feel", "three", "state", "never", "become", "between",
        "high", "really", "something", "most", "another", "much", "family", "own", "leave",
    }
)

COMPLEX_WORDS: FrozenSet[str] = frozenset(
    {
        "sophisticated", "implementation", "consideration", "fundamental", "comprehensive", "significance",
        "extraordinary", "revolutionary", "unprecedented", "phenomenal", "magnificent", "consequently",
        "nevertheless", "furthermore", "elaborate", "intricate", "meticulous", "substantial", "considerable",
        "remarkable", "exceptional", "outstanding", "distinguished", "prominent", "inevitable", "essential",
        "critical", "crucial", "significant", "extensive", "thorough",
        "advanced", "complex", "detailed", "specific",
        "particular", "individual", "unique", "distinct", "separate", "independent", "autonomous",
        "contemporary", "modern", "current", "recent", "latest", "updated", "revised", "modified",
        "alternative", "optional", "additional", "supplementary", "complementary", "corresponding",
        "equivalent", "similar", "comparable", "analogous", "parallel", "related", "associated",
        "connected", "linked", "attached", "combined", "integrated", "unified", "consolidated",
    }
)

SUBORDINATE_MARKERS: Tuple[str, ...] = (
    "because", "since", "although", "while", "whereas", "if", "unless", "until",
    "before", "after", "when", "where", "which", "that", "who", "whom",
)

ABSTRACT_INDICATORS: Tuple[str, ...] = (
    "concept", "idea", "theory", "principle", "philosophy", "belief", "thought", "notion",
    "understanding", "knowledge", "wisdom", "meaning", "purpose", "significance", "importance",
    "value", "quality", "characteristic", "nature", "essence", "reality", "truth", "fact",
    "assumption", "hypothesis", "conclusion", "inference", "implication", "consequence",
)

TECHNICAL_INDICATORS: Tuple[str, ...] = (
    "system", "process", "method", "approach", "technique", "procedure", "mechanism",
    "function", "operation", "performance", "efficiency", "optimization", "analysis",
    "evaluation", "assessment", "measurement", "calculation", "computation", "algorithm",
    "structure", "framework", "architecture", "design", "implementation", "development",
)

SIMPLE_EMOTION_WORDS: FrozenSet[str] = frozenset(
    {
        "happy", "sad", "angry", "fear", "joy", "love", "hate", "excited", "nervous",
        "calm", "stressed", "peaceful", "worried", "confident", "anxious", "hopeful",
        "disappointed", "frustrated", "content", "lonely", "grateful", "proud",
        "embarrassed", "ashamed", "guilty", "relieved", "surprised", "shocked",
        "amazed", "confused", "curious", "interested", "bored", "tired", "energetic",
    }
)

COMPLEX_EMOTION_WORDS: FrozenSet[str] = frozenset(
    {
        "melancholy", "euphoric", "despondent", "elated", "apprehensive", "contemplative",
        "nostalgic", "bittersweet", "ambivalent", "conflicted", "overwhelmed", "underwhelmed",
        "disillusioned", "enlightened", "empowered", "vulnerable", "resilient", "determined",
    }
)

EMOTIONAL_INTENSIFIERS: FrozenSet[str] = frozenset(
    {
        "extremely", "incredibly", "absolutely", "completely", "utterly", "deeply",
        "profoundly", "intensely", "overwhelmingly", "exceptionally", "remarkably",
    }
)

NUANCE_MARKERS: Tuple[str, ...] = (
    "but", "however", "although", "despite", "nevertheless", "yet", "still",
    "on the other hand", "at the same time", "mixed feelings", "torn between",
)


def validate_tables() -> None:
    """Check the invariants every scorer relies on."""
    for word, (emotion, intensity) in EMOTION_LEXICON.items():
        if not 0.0 < intensity <= 1.0:
            msg = f"Emotion lexicon entry {word!r} has intensity {intensity} outside (0, 1]"
            raise ConfigurationError(msg)
        if not isinstance(emotion, Emotion):
            msg = f"Emotion lexicon entry {word!r} maps to unknown emotion {emotion!r}"
            raise ConfigurationError(msg)
    for word, multiplier in INTENSIFIERS.items():
        if multiplier <= 0.0:
            msg = f"Intensifier {word!r} must have a positive multiplier"
            raise ConfigurationError(msg)
    if set(EMOTION_POLARITY) != set(Emotion):
        raise ConfigurationError("Emotion polarity table must cover every emotion")
    for table_name, table in (
        ("keyword", CATEGORY_KEYWORDS),
        ("pattern", CATEGORY_PATTERNS),
        ("importance", CATEGORY_IMPORTANCE),
    ):
        missing = set(ConceptCategory) - set(table)
        if missing:
            names = ", ".join(sorted(category.value for category in missing))
            msg = f"Category {table_name} table is missing: {names}"
            raise ConfigurationError(msg)


validate_tables()
