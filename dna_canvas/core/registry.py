"""
Registry des types de blocs — code DNA (ou alias historique) → famille de rendu.

Deux tables, toutes deux de la donnée :
  TYPE_CODES : code déclaré → famille
  STAND_INS  : famille → famille qui la remplace au rendu (implémentation de substitution)

Un code inconnu donne None ("non résolu") : l'appelant affiche un placeholder.
"""
from enum import Enum
from typing import Any, Dict, List, Optional


class BlockFamily(str, Enum):
    NAVBAR = "Navbar"
    HERO = "Hero"
    SKILLS = "Skills"
    ARTICLE = "Article"
    PORTFOLIO = "Portfolio"
    TIMELINE = "Timeline"
    STATS = "Stats"
    SPACER = "Spacer"
    BADGES = "Badges"
    PREVIEW = "Preview"
    TESTIMONIALS = "Testimonials"
    CONTACT_FORM = "ContactForm"
    SOCIAL_DOCK = "SocialDock"
    FOOTER = "Footer"
    LOGOS = "Logos"
    ACCORDION = "Accordion"
    TABS = "Tabs"
    METHODOLOGY = "Methodology"
    TECH_STACK = "TechStack"
    FEATURED_PROJECT = "FeaturedProject"
    PROJECTS_GRID = "ProjectsGrid"
    CODE_SHOWCASE = "CodeShowcase"
    RADAR_CHART = "RadarChart"


F = BlockFamily

TYPE_CODES: Dict[str, BlockFamily] = {
    # Navbar
    "B0101": F.NAVBAR, "B0102": F.NAVBAR,
    # Hero
    "B0201": F.HERO, "B0202": F.HERO, "B0203": F.HERO,
    # Skills
    "B0301": F.SKILLS, "B0302": F.SKILLS,
    # Article
    "B0401": F.ARTICLE, "B0402": F.ARTICLE,
    # Portfolio
    "B0501": F.PORTFOLIO, "B0503": F.PORTFOLIO,
    # Timeline
    "B0601": F.TIMELINE, "B0602": F.TIMELINE,
    "B0701": F.ACCORDION,
    "B0801": F.STATS,
    "B0901": F.SPACER,
    "B1001": F.TABS,
    # Contact
    "B1301": F.CONTACT_FORM, "Contact": F.CONTACT_FORM,
    "B1401": F.FOOTER,
    "B1501": F.BADGES,
    "B1601": F.PREVIEW, "B1602": F.PREVIEW,
    "B1701": F.METHODOLOGY,
    "B1801": F.TECH_STACK,
    # Features
    "B1901": F.FEATURED_PROJECT,
    "B1902": F.PROJECTS_GRID,
    "B1903": F.CODE_SHOWCASE,
    "B2101": F.LOGOS,
    # Témoignages / avis
    "B2201": F.TESTIMONIALS, "B2202": F.TESTIMONIALS, "Reviews": F.TESTIMONIALS,
    # Réseaux sociaux
    "B2401": F.SOCIAL_DOCK, "Socials": F.SOCIAL_DOCK,
}
# Le nom canonique de chaque famille est aussi un code valide
TYPE_CODES.update({family.value: family for family in BlockFamily})

# RadarChart n'a pas encore de renderer dédié : rendu via Testimonials
STAND_INS: Dict[BlockFamily, BlockFamily] = {
    F.RADAR_CHART: F.TESTIMONIALS,
}

# Codes épinglés en haut de page par le viewer
STICKY_CODES = frozenset({"B0101", "B0102"})


def declared_family(type_code: Any) -> Optional[BlockFamily]:
    """Famille déclarée par le code, sans appliquer STAND_INS."""
    if not isinstance(type_code, str):
        return None
    return TYPE_CODES.get(type_code)


def resolve(type_code: Any) -> Optional[BlockFamily]:
    """Famille de rendu effective ; None si le code est inconnu."""
    family = declared_family(type_code)
    if family is None:
        return None
    return STAND_INS.get(family, family)


def codes_for(family: BlockFamily) -> List[str]:
    """Tous les codes (legacy + alias + canonique) déclarant cette famille."""
    return [code for code, f in TYPE_CODES.items() if f is family]


def is_sticky_code(type_code: Any) -> bool:
    return isinstance(type_code, str) and type_code in STICKY_CODES
