"""Albanian political landscape: parties, leaders, issues and stances."""

from __future__ import annotations

from typing import List

from .models import (
    IssueCategory,
    IssuePriority,
    IssueStance,
    PartyPosition,
    PoliticalIssue,
    PoliticalLeader,
    PoliticalParty,
    Stance,
)

P = PartyPosition

ALBANIAN_PARTIES: List[PoliticalParty] = [
    PoliticalParty(
        "PS", "Partia Socialiste", "Partia Socialiste e Shqipërisë", "Socialist Party of Albania",
        leader="Edi Rama", founded=1991,
        ideology=("Social Democracy", "Third Way", "Pro-European"),
        position=P.GOVERNMENT, seats=74, color="#FF1744", website="https://ps.al",
        social_media={"facebook": "partiasocialiste", "instagram": "partiasocialiste", "twitter": "partiasocialiste"},
    ),
    PoliticalParty(
        "PD", "Partia Demokratike", "Partia Demokratike e Shqipërisë", "Democratic Party of Albania",
        leader="Sali Berisha", founded=1990,
        ideology=("Conservative", "Liberal Conservative", "Pro-European"),
        position=P.OPPOSITION, seats=59, color="#0277BD", website="https://pd.al",
        social_media={"facebook": "partiademokratike", "instagram": "partiademokratike"},
    ),
    PoliticalParty(
        "LSI", "Lëvizja Socialiste për Integrim", "Lëvizja Socialiste për Integrim",
        "Socialist Movement for Integration",
        leader="Ilir Meta", founded=2004, ideology=("Social Democracy", "Populism"),
        position=P.OPPOSITION, seats=4, color="#FFA726", website="https://lsi.al",
    ),
    PoliticalParty(
        "PSD", "Partia Socialdemokrate", "Partia Socialdemokrate e Shqipërisë", "Social Democratic Party of Albania",
        leader="Tom Doshi", founded=1991, ideology=("Social Democracy",),
        position=P.NEUTRAL, seats=3, color="#9C27B0",
    ),
    PoliticalParty(
        "PR", "Partia Republikane", "Partia Republikane e Shqipërisë", "Republican Party of Albania",
        leader="Fatmir Mediu", founded=1991, ideology=("National Conservatism", "Right-wing"),
        position=P.OPPOSITION, seats=0, color="#795548",
    ),
    PoliticalParty(
        "PL", "Partia e Lirisë", "Partia e Lirisë", "Freedom Party",
        leader="Ilir Meta", founded=2022, ideology=("Populism", "Anti-establishment"),
        position=P.OPPOSITION, seats=0, color="#4CAF50",
    ),
]

ALBANIAN_LEADERS: List[PoliticalLeader] = [
    PoliticalLeader(
        "edi-rama", "Edi Rama", "PS", "Prime Minister", 1964, "Academy of Arts, Tirana",
        ("Mayor of Tirana", "Minister of Culture"), 42,
    ),
    PoliticalLeader(
        "sali-berisha", "Sali Berisha", "PD", "Opposition Leader", 1944, "University of Tirana (Medicine)",
        ("President of Albania", "Prime Minister"), 38,
    ),
    PoliticalLeader(
        "ilir-meta", "Ilir Meta", "PL", "Party Leader", 1969, "University of Tirana (Economics)",
        ("President of Albania", "Prime Minister", "Speaker of Parliament"), 25,
    ),
    PoliticalLeader(
        "lulzim-basha", "Lulzim Basha", "PD", "Former Party Leader", 1974, "Utrecht University (Law)",
        ("Minister of Foreign Affairs", "Minister of Interior"), 20,
    ),
]

C, PR = IssueCategory, IssuePriority

ALBANIAN_ISSUES: List[PoliticalIssue] = [
    PoliticalIssue(
        "eu-accession", "Anëtarësimi në BE", "EU Accession", C.FOREIGN, PR.CRITICAL,
        ("PS", "PD", "LSI"), 0.75, ("EU", "Brussels", "negotiations", "chapters", "reforms"),
    ),
    PoliticalIssue(
        "corruption", "Korrupsioni", "Corruption", C.DOMESTIC, PR.CRITICAL,
        ("PS", "PD", "LSI", "PL"), -0.8, ("SPAK", "justice", "bribes", "scandal", "arrests"),
    ),
    PoliticalIssue(
        "migration", "Emigrimi", "Migration", C.SOCIAL, PR.HIGH,
        ("PS", "PD"), -0.6, ("youth", "brain drain", "diaspora", "return"),
    ),
    PoliticalIssue(
        "economy", "Ekonomia", "Economy", C.ECONOMIC, PR.HIGH,
        ("PS", "PD", "LSI"), -0.3, ("GDP", "inflation", "jobs", "investment", "tourism"),
    ),
    PoliticalIssue(
        "justice-reform", "Reforma në Drejtësi", "Justice Reform", C.DOMESTIC, PR.CRITICAL,
        ("PS", "PD"), 0.5, ("vetting", "judges", "prosecutors", "courts", "SPAK"),
    ),
    PoliticalIssue(
        "energy", "Energjia", "Energy", C.ECONOMIC, PR.HIGH,
        ("PS", "PD"), -0.4, ("electricity", "prices", "hydropower", "imports", "crisis"),
    ),
    PoliticalIssue(
        "education", "Arsimi", "Education", C.SOCIAL, PR.MEDIUM,
        ("PS", "PD"), -0.2, ("schools", "universities", "reform", "quality", "teachers"),
    ),
    PoliticalIssue(
        "healthcare", "Shëndetësia", "Healthcare", C.SOCIAL, PR.HIGH,
        ("PS", "PD", "LSI"), -0.5, ("hospitals", "doctors", "medicine", "insurance", "COVID"),
    ),
    PoliticalIssue(
        "environment", "Mjedisi", "Environment", C.ENVIRONMENTAL, PR.MEDIUM,
        ("PS", "PD"), 0.3, ("pollution", "waste", "rivers", "national parks", "climate"),
    ),
    PoliticalIssue(
        "infrastructure", "Infrastruktura", "Infrastructure", C.ECONOMIC, PR.HIGH,
        ("PS", "PD"), 0.2, ("roads", "airports", "ports", "construction", "investment"),
    ),
]

ALBANIAN_STANCES: List[IssueStance] = [
    IssueStance("eu-accession", "PS", Stance.SUPPORT, 0.9,
                ("Albania will join EU by 2030", "Reforms are on track")),
    IssueStance("eu-accession", "PD", Stance.SUPPORT, 0.8,
                ("Government is failing EU negotiations", "We would do better")),
    IssueStance("corruption", "PD", Stance.OPPOSE, 1.0,
                ("Government is most corrupt ever", "SPAK must investigate PM")),
    IssueStance("corruption", "PS", Stance.OPPOSE, 0.7,
                ("Justice reform is working", "Opposition leaders are corrupt")),
    IssueStance("migration", "PS", Stance.NEUTRAL, 0.5,
                ("Creating opportunities at home", "Diaspora is important")),
    IssueStance("migration", "PD", Stance.OPPOSE, 0.8,
                ("Youth are fleeing", "Government has failed")),
]
