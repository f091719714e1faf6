"""Reference data for case-study normalization.

This module defines the canonical service silos, the technology category
keyword map, and the field-name synonyms used to read case studies whose
schemas drift between sources. Everything here is plain data so that the
taxonomy stays auditable; the classifiers in :mod:`caseintel.classification`
and :mod:`caseintel.normalization.technology` only interpret it.
"""

# Canonical service silos. Order is significant: normalized service lists are
# always emitted in this order.
SERVICE_SILOS = (
    "General Customer Service & Support",
    "Sales & Omnichannel Experience",
    "AI & Advanced Analytics",
    "Automation & Digital Transformation",
    "General Back Office & Operations",
    "Finance, Accounting, & Claims",
    "HR & People Services",
    "IT & Technology Services",
    "Risk, Compliance, & Trust",
    "Specialized Operations & Consulting",
)

# Technology categories mapped to the keywords that identify them. Matching is
# symmetric substring containment, first category wins.
TECH_CATEGORIES = {
    "AI & Machine Learning": [
        "ai",
        "genai",
        "generative ai",
        "llm",
        "large language model",
        "machine learning",
        "ml",
        "deep learning",
        "neural network",
        "artificial intelligence",
    ],
    "Chatbots & Virtual Assistants": [
        "chatbot",
        "bot",
        "virtual assistant",
        "conversational ai",
        "voicebot",
        "intelligent virtual agent",
        "iva",
    ],
    "Contact Center Platforms": [
        "genesys",
        "avaya",
        "cisco",
        "nice",
        "verint",
        "five9",
        "talkdesk",
        "twilio",
        "ringcentral",
        "vonage",
        "bandwidth",
        "ccaas",
        "contact center",
    ],
    "CRM Platforms": [
        "salesforce",
        "microsoft dynamics",
        "oracle",
        "sap",
        "hubspot",
        "zoho",
        "zendesk",
        "freshworks",
        "pipedrive",
        "crm",
        "service cloud",
        "sales cloud",
    ],
    "Analytics & BI": [
        "tableau",
        "power bi",
        "qlik",
        "looker",
        "sisense",
        "analytics",
        "business intelligence",
        "data visualization",
        "splunk",
        "domo",
    ],
    "RPA & Automation": [
        "uipath",
        "automation anywhere",
        "blue prism",
        "rpa",
        "robotic process",
        "workfusion",
        "kofax",
        "pega",
        "appian",
        "nintex",
    ],
    "Cloud Infrastructure": [
        "aws",
        "azure",
        "google cloud",
        "gcp",
        "amazon web services",
        "microsoft azure",
        "ibm cloud",
        "oracle cloud",
    ],
    "Collaboration Tools": [
        "slack",
        "teams",
        "zoom",
        "webex",
        "microsoft teams",
        "google workspace",
        "office 365",
        "sharepoint",
    ],
    "Workforce Management": [
        "nice iwfm",
        "verint wfm",
        "aspect",
        "calabrio",
        "workforce management",
        "wfm",
        "scheduling",
        "forecasting",
    ],
    "Quality Management": [
        "nice nexidia",
        "verint speech analytics",
        "callminer",
        "tethr",
        "clarabridge",
        "quality management",
        "qm",
    ],
    "Knowledge Management": [
        "servicenow",
        "confluence",
        "guru",
        "bloomfire",
        "coveo",
        "knowledge base",
        "kb",
    ],
}

# Technology tokens that carry no information and are dropped.
PLACEHOLDER_TOKENS = frozenset({"n/a", "na", "none"})

# Field-name synonyms, tried in order, for each logical case-study field.
FIELD_SYNONYMS = {
    "client_industry": ["client_industry", "Client Industry", "industry", "clientIndustry", "client_industry_raw"],
    "business_challenge": [
        "business_challenge",
        "Business Challenge",
        "challenge",
        "businessChallenge",
        "business_problem",
        "pain_point",
    ],
    "solution_overview": [
        "solution_overview",
        "Solution Overview",
        "solution",
        "solutionOverview",
        "approach",
        "solution_description",
    ],
    "services_provided": ["services_provided", "Services Provided", "services", "servicesProvided", "service_offerings"],
    "services_normalized": ["services_normalized", "Services Normalized", "servicesNormalized"],
    "service_channels": ["service_channels", "Service Channels", "channels", "serviceChannels", "contact_channels"],
    "technologies_used": [
        "technologies_used",
        "Technologies Used",
        "technology",
        "technologiesUsed",
        "tech_stack",
        "platforms",
    ],
    "technologies_normalized": ["technologies_normalized", "Technologies Normalized", "technologiesNormalized"],
    "geographies": ["geographies", "Geographies", "Regions", "geo", "geography", "regions"],
    "results_metrics": ["results_metrics", "Results Metrics", "results", "outcomes", "resultsMetrics", "metrics"],
    "client_industry_normalized": [
        "client_industry_normalized",
        "Client Industry Normalized",
        "clientIndustryNormalized",
    ],
    "title": ["title", "Title", "case_study_title", "name"],
    "bpo_provider": ["bpo_provider", "BPO Provider", "bpoProvider", "provider_name"],
}
