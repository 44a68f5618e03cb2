"""
Call Scorer Configuration
Phrase lexicons, built-in rubrics and grading thresholds used by the
speaker classifier and the criterion evaluators.
"""

# =============================================================================
# SPEAKER ROLE CLASSIFICATION
# =============================================================================
SPEAKER_GREETING_WORDS = [
    "good morning", "good afternoon", "good evening", "hello", "hi there"
]

COMPANY_INDICATORS = [
    "calling", "support", "service", "company", "department"
]

# Agent-register phrases, including the filler forms diarized speech produces
AGENT_PROFESSIONAL_TERMS = [
    "thank you for calling", "my name is", "how can i help", "how may i assist",
    "i understand", "let me help", "i apologize", "company", "our system",
    "i can help you with", "let me check", "i see here", "our records show",
    "i would be happy to", "is there anything else", "thank you for your patience",
    "um let me", "uh i can", "so what i can do", "okay so"
]

SPEAKER_SCORE_WEIGHTS = {
    "greeting": 3,
    "company_name": 4,
    "professional_terms": 5,
    "verbose": 2,
    "first_speaker": 2
}

VERBOSE_WORDS_PER_UTTERANCE = 15

ROLE_AGENT = "agent"
ROLE_CUSTOMER = "customer"

ROLE_LABELS = {
    ROLE_AGENT: "Agent",
    ROLE_CUSTOMER: "Customer"
}

# =============================================================================
# OPENING (fixed 25-point budget)
# =============================================================================
OPENING_ELEMENTS = {
    "greeting": {
        "keywords": ["good morning", "good afternoon", "good evening", "hello"],
        "points": 5
    },
    "thanks_for_calling": {
        "keywords": ["thank you for calling", "thanks for calling"],
        "points": 8
    },
    "self_identification": {
        "keywords": ["my name is", "this is"],
        "points": 5
    },
    "offer_assistance": {
        "keywords": ["how can i help", "how may i assist", "what can i do for you"],
        "points": 7
    }
}

OPENING_FLOOR_SCORE = 5

# =============================================================================
# PROBLEM RESOLUTION (fractions of max score)
# =============================================================================
PROBLEM_RESOLUTION = {
    "empathy_words": ["sorry", "apologize", "understand", "frustrating", "inconvenience"],
    "ownership_phrases": ["let me help", "i can help", "i'll take care", "let me see what i can do"],
    "question_words": ["what", "when", "how", "why", "where", "can you tell me", "could you"],
    "solution_indicators": ["here's what", "what we can do", "solution", "fix", "resolve", "try this"],
    "confirmation_phrases": ["does that work", "is that better", "resolved", "fixed", "working now"]
}

PROBLEM_RESOLUTION_WEIGHTS = {
    "empathy": 0.20,
    "ownership": 0.15,
    "per_question": 0.05,
    "questions_cap": 0.25,
    "solution": 0.25,
    "confirmation": 0.15
}

# =============================================================================
# CLOSURE (fractions of max score)
# =============================================================================
CLOSURE = {
    "further_assistance": ["anything else", "other questions", "additional questions", "else i can help"],
    "thanks": ["thank you", "thanks"],
    "sign_off": ["have a great", "have a good", "take care", "goodbye", "good day"]
}

CLOSURE_WEIGHTS = {
    "further_assistance": 0.40,
    "thanks": 0.30,
    "sign_off": 0.30
}

CLOSURE_WINDOW_CHARS = 800

# =============================================================================
# EMPATHY (fractions of max score)
# =============================================================================
EMPATHY = {
    "strong_phrases": ["i'm sorry to hear", "that must be frustrating", "i understand how", "i can imagine"],
    "basic_words": ["sorry", "apologize", "understand", "frustrating"],
    "positive_tone": ["absolutely", "certainly", "of course", "definitely", "glad to help"]
}

EMPATHY_WEIGHTS = {
    "strong": 0.40,
    "per_basic_line": 0.15,
    "basic_cap": 0.45,
    "positive_tone": 0.15
}

# =============================================================================
# GENERIC / KEYWORD CRITERIA
# =============================================================================
GENERIC_WEIGHTS = {
    "base": 0.50,
    "balanced_interaction": 0.30,
    "multiple_turns": 0.20
}

# Agent/customer word ratio considered a balanced conversation (exclusive)
BALANCED_RATIO_RANGE = (0.8, 3.0)

MULTIPLE_TURNS_MIN_LINES = 2

# Cap applied to a generic criterion whose required keywords are missing
REQUIRED_KEYWORD_CAP = 0.50

# Fraction of max score awarded when no agent speech is detected
NO_AGENT_FLOOR_RATIO = 0.10

# =============================================================================
# CRITERION DISPATCH
# =============================================================================
CATEGORY_OPENING = "opening"
CATEGORY_PROBLEM_RESOLUTION = "problem_resolution"
CATEGORY_CLOSURE = "closure"
CATEGORY_EMPATHY = "empathy"
CATEGORY_GENERIC = "generic"

# Exact criterion ids routed to the built-in evaluators
CRITERION_CATEGORIES = {
    "greeting_script": CATEGORY_OPENING,
    "custom_greeting": CATEGORY_OPENING,
    "problem_solving": CATEGORY_PROBLEM_RESOLUTION,
    "custom_resolution": CATEGORY_PROBLEM_RESOLUTION,
    "closure": CATEGORY_CLOSURE,
    "custom_followup": CATEGORY_CLOSURE,
    "custom_empathy": CATEGORY_EMPATHY
}

# =============================================================================
# FEEDBACK & GRADING
# =============================================================================
FEEDBACK_TIERS = {
    "excellent": 0.8,
    "good": 0.6
}

GRADE_THRESHOLDS = [
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D")
]

FAILING_GRADE = "F"

# =============================================================================
# BUILT-IN RUBRICS
# =============================================================================
DEFAULT_RUBRIC = [
    {
        "id": "greeting_script",
        "name": "Greeting & Opening",
        "description": "Agent adhered to greeting script, identified themselves, "
                       "mentioned company name, and offered assistance",
        "max_score": 25,
        "weight": 2.5,
        "keywords": ["good morning", "good afternoon", "hello", "my name is",
                     "thank you for calling", "how can i help"],
        "category": "Opening"
    },
    {
        "id": "problem_solving",
        "name": "Problem Solving Abilities",
        "description": "Agent took ownership, asked pertinent questions, "
                       "provided appropriate solutions, and confirmed resolution",
        "max_score": 30,
        "weight": 3.0,
        "keywords": ["sorry", "apologize", "let me help", "solution", "resolve", "fix"],
        "category": "Problem Resolution"
    },
    {
        "id": "closure",
        "name": "Call Closure",
        "description": "Agent followed closure guidelines, asked for additional "
                       "questions, and thanked customer",
        "max_score": 15,
        "weight": 1.5,
        "keywords": ["anything else", "additional questions", "thank you"],
        "category": "Closing"
    }
]

SAMPLE_CUSTOM_RUBRIC = [
    {
        "id": "custom_greeting",
        "name": "Professional Greeting",
        "description": "Agent provides warm, professional greeting with identification",
        "max_score": 20,
        "weight": 2.0,
        "keywords": ["good morning", "good afternoon", "hello", "my name is"],
        "required_keywords": ["thank you for calling"],
        "category": "Opening"
    },
    {
        "id": "custom_empathy",
        "name": "Empathy & Understanding",
        "description": "Agent demonstrates empathy and understanding of customer situation",
        "max_score": 25,
        "weight": 2.5,
        "keywords": ["sorry", "understand", "frustrating", "apologize"],
        "category": "Soft Skills"
    },
    {
        "id": "custom_resolution",
        "name": "Issue Resolution",
        "description": "Agent effectively resolves customer issue with clear steps",
        "max_score": 30,
        "weight": 3.0,
        "keywords": ["solution", "fix", "resolve", "steps", "help"],
        "required_keywords": ["let me help"],
        "category": "Problem Solving"
    },
    {
        "id": "custom_followup",
        "name": "Follow-up & Closure",
        "description": "Agent ensures customer satisfaction and provides proper closure",
        "max_score": 15,
        "weight": 1.5,
        "keywords": ["anything else", "questions", "satisfied", "help"],
        "category": "Closing"
    }
]
