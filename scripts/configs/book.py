"""Book pipeline configuration."""

from book import BatchingConfig, BookConfig, BookMetadata, PageLayout

from .common import CHROME_EXECUTABLE, OUTPUT_PATH, SOURCE_PATH  # noqa: F401

# --- Book configuration (composable) ---
config = BookConfig(
    metadata=BookMetadata(
        title="Building Microservices Full-Stack",
        subtitle="From Zero to Production",
        tagline="A Practical Engineering Guide",
        author="Manazir Ali",
        author_role="Full-Stack Software Engineer",
        edition="First Edition",
        version="v1.0.0",
        published="February 2026",
        copyright_year="2026",
        built_with=(
            "TypeScript, Express.js, Next.js 15, React 19, "
            "PostgreSQL, Prisma, Docker, Kubernetes"
        ),
        source_code="github.com/mnzralee/fullstack-grocery",
        about_author=(
            "Manazir Ali is a full-stack software engineer who builds production financial "
            "blockchain systems. His work spans the entire stack: from React frontends to "
            "NestJS microservices, from PostgreSQL databases to Hyperledger Fabric smart "
            "contracts, and from Docker containers to Kubernetes clusters.",
            "The patterns in this book are drawn directly from his experience engineering a "
            "production financial protocol, where a single bug in a transfer function can "
            "mean real money disappearing. That kind of pressure teaches discipline, "
            "methodology, and deliberate engineering.",
            "He believes that every line of code is a chance to create, learn, and grow, and "
            "that little by little, we shape the future one line of code at a time.",
        ),
    ),

    # Trim size: 7in x 10in technical-book format
    layout=PageLayout(),

    # Lower chapters_per_batch if a batch reports a height above the ceiling
    batching=BatchingConfig(chapters_per_batch=5),
)
