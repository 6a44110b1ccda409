# Ideas de insignias para el paso 1 del asistente de creación.
# name, description, category, suggested_style, suggested_template
SUGGESTIONS = [
    ("Level Up Legend", "Created an innovative gamification system that transforms user engagement through points, levels, and progression mechanics", "Gamification", "round-medal-minimal", "gaming-achievement"),
    ("Quest Master", "Designed and implemented a compelling quest-based user journey with meaningful rewards and challenges", "Gamification", "shield-crest-modern", "gaming-achievement"),
    ("Leaderboard Luminary", "Built dynamic competitive features that drive healthy competition and community engagement", "Gamification", "ribbon-plaque", "gaming-achievement"),
    ("Personalization Pioneer", "Developed intelligent personalization that adapts user experience based on behavior and preferences", "Personalization", "shield-crest-modern", "corporate-professional"),
    ("Recommendation Wizard", "Created smart recommendation engines that deliver perfectly tailored content and suggestions", "Personalization", "round-medal-minimal", "flat-modern"),
    ("Adaptive Interface Innovator", "Built dynamic UI that morphs and customizes itself to individual user patterns and needs", "Personalization", "ribbon-plaque", "flat-modern"),
    ("Data Storyteller Supreme", "Transformed complex datasets into compelling visual narratives that reveal hidden insights", "Data Visualization", "ribbon-plaque", "corporate-professional"),
    ("Chart Champion", "Created stunning interactive visualizations that make data accessible and engaging", "Data Visualization", "round-medal-minimal", "flat-modern"),
    ("Dashboard Dynamo", "Built comprehensive dashboards that turn raw data into actionable business intelligence", "Data Visualization", "shield-crest-modern", "corporate-professional"),
    ("AI Whisperer", "Seamlessly integrated AI models into applications with exceptional user experience and performance", "AI Integration", "shield-crest-modern", "technical-blueprint"),
    ("Prompt Engineering Pro", "Mastered the art of AI prompt design to create sophisticated and reliable AI-powered features", "AI Integration", "round-medal-minimal", "technical-blueprint"),
    ("ML Model Maestro", "Successfully trained, deployed, and integrated custom machine learning models into production apps", "AI Integration", "shield-crest-modern", "technical-blueprint"),
    ("Full-Stack Fusion", "Delivered end-to-end solutions combining frontend, backend, and AI components flawlessly", "Technical Excellence", "round-medal-minimal", "corporate-professional"),
    ("API Artisan", "Created elegant and efficient APIs that seamlessly connect AI services with user applications", "Technical Excellence", "shield-crest-modern", "technical-blueprint"),
    ("Performance Optimizer", "Achieved exceptional app performance while integrating complex AI and data processing features", "Technical Excellence", "ribbon-plaque", "technical-blueprint"),
    ("48-Hour Hero", "Delivered a fully functional, polished application within the hackathon timeframe", "Hackathon Special", "round-medal-minimal", "gaming-achievement"),
    ("Demo Day Dazzler", "Presented a compelling demonstration that captivated judges and audience with clear impact", "Hackathon Special", "ribbon-plaque", "vintage-stamp"),
    ("Team Synergy Star", "Facilitated exceptional collaboration and coordination within a diverse hackathon team", "Hackathon Special", "shield-crest-modern", "corporate-professional"),
    ("Best Failure", "Most fearless attempt that didn't work - celebrated for taking bold risks, learning from failure, and pushing boundaries", "Hackathon Special", "shield-crest-modern", "vintage-stamp"),
]

CATEGORIES = list(dict.fromkeys(s[2] for s in SUGGESTIONS))


def get_suggestions(category: str | None = None) -> list[dict]:
    out = []
    for name, description, cat, style, template in SUGGESTIONS:
        if category and cat != category:
            continue
        out.append({
            "name": name,
            "description": description,
            "category": cat,
            "suggestedStyle": style,
            "suggestedTemplate": template,
        })
    return out
