"""Static keyword tables shared by the analysis components."""
from types import MappingProxyType


# Ordered (intent, keywords). Order is the tie-break when several rules match.
INTENT_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("code_generation", (
        "write", "code", "implement", "function", "program", "script",
        "algorithm", "build", "create a", "develop",
    )),
    ("explanation", (
        "explain", "what is", "how does", "describe", "tell me about",
        "define", "meaning of", "why does",
    )),
    ("debugging", (
        "fix", "debug", "error", "bug", "issue", "not working", "wrong",
        "broken", "failing",
    )),
    ("creative_writing", (
        "write a story", "poem", "essay", "blog", "article", "creative",
        "narrative", "fiction",
    )),
    ("data_analysis", (
        "analyze", "data", "chart", "graph", "statistics", "dataset", "csv",
        "visualize", "plot",
    )),
    ("summarization", (
        "summarize", "summary", "tldr", "shorten", "condense", "brief",
        "key points",
    )),
    ("translation", (
        "translate", "convert to", "in spanish", "in french", "in hindi",
        "localize",
    )),
    ("comparison", (
        "compare", "difference between", "vs", "versus", "pros and cons",
        "better",
    )),
    ("instruction", (
        "how to", "steps to", "guide", "tutorial", "instructions",
        "walk me through", "show me how",
    )),
)

CONSTRAINT_CATEGORIES: tuple[str, ...] = (
    "language",
    "level",
    "output_format",
    "scope",
    "examples",
)

CONSTRAINT_INDICATORS: MappingProxyType = MappingProxyType({
    "language": (
        "javascript", "python", "java", "c++", "c#", "ruby", "go", "rust",
        "typescript", "php", "swift", "kotlin", "scala", "r", "matlab",
        "sql", "html", "css", "bash", "shell", "powershell", "dart",
    ),
    "level": (
        "beginner", "intermediate", "advanced", "expert", "novice",
        "basic", "simple", "complex", "in-depth",
    ),
    "output_format": (
        "code only", "code + explanation", "step by step", "bullet points",
        "table", "json", "markdown", "diagram", "pseudocode", "list",
    ),
    "scope": (
        "function", "class", "module", "full app", "snippet", "project",
        "component", "api", "endpoint", "page", "service", "script",
    ),
    "examples": (
        "example", "for instance", "e.g.", "such as", "like this",
        "sample", "demo", "illustration",
    ),
})

DEFAULT_SUGGESTIONS: MappingProxyType = MappingProxyType({
    "language": ("Python", "JavaScript", "Java", "TypeScript", "C++", "Go"),
    "level": ("Beginner", "Intermediate", "Advanced"),
    "output_format": ("Code only", "Code + Explanation", "Step-by-step", "Bullet points"),
    "scope": ("Function", "Class", "Full module", "Code snippet"),
    "examples": ("Include examples", "No examples needed", "Show sample output"),
})

# Labels used when a filled constraint is written back into the prompt
CONSTRAINT_LABELS: MappingProxyType = MappingProxyType({
    "language": "Programming language",
    "level": "Target audience level",
    "output_format": "Output format",
    "scope": "Scope",
    "examples": "Examples",
})

ACTION_VERBS: tuple[str, ...] = (
    "write", "create", "build", "explain", "fix", "debug", "analyze",
    "compare", "list", "generate", "design", "implement", "describe",
    "summarize", "translate", "convert", "show", "tell", "help", "make",
)

STOP_WORDS: frozenset[str] = frozenset({
    "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "can", "shall", "to", "of", "in", "for",
    "on", "with", "at", "by", "from", "as", "into", "through", "during",
    "before", "after", "above", "below", "between", "and", "but", "or",
    "nor", "not", "so", "yet", "both", "either", "neither", "each",
    "every", "all", "any", "few", "more", "most", "other", "some",
    "such", "no", "only", "own", "same", "than", "too", "very", "just",
    "about", "it", "its", "i", "me", "my", "we", "our", "you", "your",
    "he", "she", "they", "them", "this", "that", "these", "those",
    "what", "which", "who", "whom", "how", "when", "where", "why",
    "if", "then", "else", "while", "up", "out", "off",
})
