"""English (reference locale) site data."""

SITE_DATA = {
    "name": "OptiML",
    "title": "OptiML",
    "description": "Your AI-powered partner for intelligent optimization and machine learning solutions.",
    # used as the default author for blog posts
    "author": {
        "name": "Cosmic Themes",
        "email": "creator@cosmicthemes.com",
        "twitter": "Cosmic_Themes",
    },
    # meta image for pages that have none of their own
    "default_image": {
        "src": "/images/cosmic-themes-logo.png",
        "alt": "Cosmic Themes logo",
    },
}

# One level of dropdown is supported. Icons refer to files under src/icons,
# e.g. "tabler/icon" for "tabler/icon.svg".
NAV_DATA = [
    {"text": "Projects", "link": "/optiml-website/projects/"},
    {"text": "Services", "link": "/optiml-website/services/"},
    {"text": "Blog", "link": "/optiml-website/blog/"},
    {"text": "Resume", "link": "/optiml-website/resume/"},
]

FAQ_DATA = [
    {
        "question": "What does a Principal Data Scientist do?",
        "answer": (
            "At OptiML, I help organizations make smarter decisions by combining advanced analytics, "
            "machine learning, and optimization. I design and implement models that recommend the best "
            "actions based on your goals, trade-offs, and constraints."
        ),
    },
    {
        "question": "How is this different from traditional data science?",
        "answer": (
            "Traditional data science often focuses on describing or predicting outcomes. My focus is on "
            "deciding what to do: integrated ML and optimization models that simulate scenarios, evaluate "
            "options, and surface the most effective path forward."
        ),
    },
    {
        "question": "What tools and technologies do you use?",
        "answer": (
            "My go-to tools include Gurobi, Pyomo, OR-Tools and PuLP for optimization, Python "
            "(scikit-learn, pandas, NumPy) and SQL for machine learning and data, and Streamlit or "
            "FastAPI for deployment."
        ),
    },
    {
        "question": "What if our data isn't perfect?",
        "answer": (
            "Most projects start with incomplete or messy data. I help evaluate what is usable, build "
            "model-ready datasets, and develop solutions that evolve with your data maturity."
        ),
    },
]

TESTIMONIAL_DATA = [
    {
        "text": "The scheduling model cut our planning time from days to minutes.",
        "name": "Operations Lead",
        "title": "Logistics company",
    },
    {
        "text": "Forecasts and budget allocation finally live in one decision workflow.",
        "name": "Marketing Director",
        "title": "Consumer brand",
    },
]
