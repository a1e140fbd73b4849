"""Static descriptive metadata keyed by normalized language name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from domain.models import LanguageInfo


def normalize_name(name: str) -> str:
    return name.strip().casefold()


DEFAULT_INFO = LanguageInfo(
    description="A popular programming language.",
    use_cases=("General-purpose programming",),
    frameworks=("None",),
)

_DELPHI = LanguageInfo(
    "Delphi/Object Pascal is an object-oriented dialect of Pascal.",
    ("Desktop applications", "Database applications", "Cross-platform development", "Embedded systems"),
    ("FireMonkey", "VCL", "RAD Studio"),
)
_ASSEMBLY = LanguageInfo(
    "Assembly language is a low-level language that maps directly onto machine code.",
    ("Operating systems", "Device drivers", "Embedded systems", "Reverse engineering", "Performance tuning"),
    ("NASM", "MASM", "GAS"),
)

_ENTRIES = {
    "python": LanguageInfo(
        "Python is a high-level, general-purpose language known for its clean, readable syntax.",
        ("Data science", "Machine learning", "Web development", "Automation scripts", "Scientific computing"),
        ("Django", "Flask", "FastAPI", "PyTorch", "TensorFlow", "Pandas"),
    ),
    "c": LanguageInfo(
        "C is a general-purpose procedural language widely used for systems and embedded work.",
        ("Operating systems", "Embedded systems", "Device drivers", "Game engines", "Databases"),
        ("Linux Kernel", "SQLite", "Git", "Nginx"),
    ),
    "c++": LanguageInfo(
        "C++ extends C with object-oriented programming and is used for high-performance software.",
        ("Game development", "Systems software", "Web browsers", "Databases", "Graphics"),
        ("Qt", "Boost", "Unreal Engine", "OpenCV"),
    ),
    "java": LanguageInfo(
        "Java is an object-oriented language known for running on any platform with a JVM.",
        ("Enterprise applications", "Android development", "Big data", "Cloud computing", "Microservices"),
        ("Spring", "Hibernate", "Maven", "Gradle", "Apache Kafka"),
    ),
    "c#": LanguageInfo(
        "C# is Microsoft's object-oriented language, used mainly on the .NET platform.",
        ("Windows applications", "Game development", "Web services", "Enterprise software", "Cloud applications"),
        (".NET Core", "ASP.NET", "Unity", "Xamarin", "Entity Framework"),
    ),
    "javascript": LanguageInfo(
        "JavaScript is the core language of the web, used on both the front end and back end.",
        ("Front-end development", "Back-end development", "Mobile apps", "Desktop apps", "Game development"),
        ("React", "Vue.js", "Angular", "Node.js", "Express", "Next.js"),
    ),
    "go": LanguageInfo(
        "Go is a language from Google known for its simplicity and strong concurrency support.",
        ("Cloud native", "Microservices", "Network programming", "DevOps tooling", "Blockchain"),
        ("Gin", "Echo", "Kubernetes", "Docker", "Prometheus"),
    ),
    "rust": LanguageInfo(
        "Rust is a systems language focused on safety, concurrency and performance.",
        ("Systems programming", "WebAssembly", "Embedded", "Command-line tools", "Blockchain"),
        ("Actix", "Rocket", "Tokio", "Axum", "Diesel"),
    ),
    "php": LanguageInfo(
        "PHP is a server-side scripting language widely used for web development.",
        ("Web development", "CMS platforms", "E-commerce", "API development", "Blogs"),
        ("Laravel", "Symfony", "WordPress", "Drupal", "Magento"),
    ),
    "r": LanguageInfo(
        "R is a language for statistical computing and graphics.",
        ("Statistical analysis", "Data visualization", "Machine learning", "Bioinformatics", "Financial analysis"),
        ("ggplot2", "dplyr", "tidyr", "Shiny", "caret"),
    ),
    "sql": LanguageInfo(
        "SQL is the standard language for managing relational databases.",
        ("Data querying", "Data management", "Reporting", "Data analysis", "ETL"),
        ("MySQL", "PostgreSQL", "Oracle", "SQL Server", "SQLite"),
    ),
    "kotlin": LanguageInfo(
        "Kotlin is a modern language from JetBrains that is fully interoperable with Java.",
        ("Android development", "Server-side development", "Cross-platform development", "Web development"),
        ("Ktor", "Spring Boot", "Jetpack Compose", "Exposed"),
    ),
    "visual basic": LanguageInfo(
        "Visual Basic is Microsoft's event-driven programming language.",
        ("Windows applications", "Office automation", "Database applications", "Rapid prototyping"),
        ("VB.NET", "VBA", "Visual Studio"),
    ),
    "perl": LanguageInfo(
        "Perl is a high-level, general-purpose interpreted language.",
        ("Text processing", "System administration", "Web development", "Network programming", "Bioinformatics"),
        ("Mojolicious", "Dancer", "Catalyst", "CPAN"),
    ),
    "delphi/object pascal": _DELPHI,
    "delphi": _DELPHI,
    "fortran": LanguageInfo(
        "Fortran is one of the oldest high-level languages, used mainly for scientific computing.",
        ("Scientific computing", "Numerical analysis", "High-performance computing", "Weather modelling", "Physics simulation"),
        ("LAPACK", "BLAS", "OpenMP", "MPI"),
    ),
    "matlab": LanguageInfo(
        "MATLAB is a language and environment for numerical computing.",
        ("Numerical computing", "Signal processing", "Image processing", "Control systems", "Deep learning"),
        ("Simulink", "Image Processing Toolbox", "Deep Learning Toolbox"),
    ),
    "ada": LanguageInfo(
        "Ada is a structured, statically typed language for high-integrity systems.",
        ("Aerospace", "Defence systems", "Railway systems", "Medical devices", "Embedded systems"),
        ("GNAT", "SPARK", "Ada Web Server"),
    ),
    "assembly language": _ASSEMBLY,
    "assembly": _ASSEMBLY,
    "scratch": LanguageInfo(
        "Scratch is a visual programming language used mainly for teaching.",
        ("Programming education", "Game development", "Animation", "Interactive stories"),
        ("Scratch 3.0", "ScratchJr"),
    ),
}

LANGUAGE_DETAILS: Mapping[str, LanguageInfo] = MappingProxyType(_ENTRIES)


def lookup(name: str) -> LanguageInfo:
    """Return metadata for ``name`` (case-insensitive), or ``DEFAULT_INFO``."""
    return LANGUAGE_DETAILS.get(normalize_name(name), DEFAULT_INFO)
