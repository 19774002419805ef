"""Dutch site data."""

SITE_DATA = {
    "name": "OptiML",
    "title": "OptiML",
    "description": "Uw AI-partner voor intelligente optimalisatie- en machine-learningoplossingen.",
    "author": {
        "name": "Cosmic Themes",
        "email": "creator@cosmicthemes.com",
        "twitter": "Cosmic_Themes",
    },
    "default_image": {
        "src": "/images/cosmic-themes-logo.png",
        "alt": "Cosmic Themes logo",
    },
}

NAV_DATA = [
    {"text": "Projecten", "link": "/optiml-website/nl/projects/"},
    {"text": "Diensten", "link": "/optiml-website/nl/services/"},
    {"text": "Blog", "link": "/optiml-website/nl/blog/"},
    {"text": "CV", "link": "/optiml-website/nl/resume/"},
]

FAQ_DATA = [
    {
        "question": "Wat doet een Principal Data Scientist?",
        "answer": (
            "Bij OptiML help ik organisaties slimmere beslissingen te nemen door geavanceerde analyses, "
            "machine learning en optimalisatie te combineren."
        ),
    },
    {
        "question": "Wat als onze data niet perfect is?",
        "answer": (
            "De meeste projecten beginnen met onvolledige of rommelige data. Ik help bepalen wat bruikbaar "
            "is en bouw oplossingen die meegroeien met de kwaliteit van uw data."
        ),
    },
]

TESTIMONIAL_DATA = [
    {
        "text": "Het planningsmodel bracht onze planningstijd terug van dagen naar minuten.",
        "name": "Operations Lead",
        "title": "Logistiek bedrijf",
    },
]
