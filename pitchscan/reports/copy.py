"""Report copy per language.

All human-readable report text lives here. Analysis code works with
language-neutral enums; the composer looks up their wording in a
ReportCopy.
"""

from dataclasses import dataclass

from pitchscan.config import ReportLanguage
from pitchscan.extraction.contrast import ContrastExampleKind
from pitchscan.reports.ranking import RankingReason, Visibility
from pitchscan.scoring.calculator import ScoreLabel


@dataclass(frozen=True)
class ReportCopy:
    """Every string the report needs, in one language."""

    # Placeholders and query words
    keyword_placeholder: str
    region_placeholder: str
    best_qualifier: str
    price_word: str

    # Enum wording
    score_labels: dict[ScoreLabel, str]
    visibility_labels: dict[Visibility, str]
    ranking_reasons: dict[RankingReason, str]
    contrast_example_formats: dict[ContrastExampleKind, str]

    # Ranking table
    ranking_title: str
    ranking_header: tuple[str, str, str]

    # Part 1
    part_heading: str
    score_intro: tuple[str, str]
    weak_ranking_intro: str
    weak_phrases_with_city: str
    weak_phrases_without_city: str

    # Part 2
    problems_title: str
    why_heading: str
    consequences_heading: str
    seo_title: str
    seo_headlines: tuple[str, ...]
    seo_no_schema: str
    seo_little_text: str
    seo_no_service_headings: str
    seo_no_nav: str
    seo_consequences: tuple[str, ...]
    uu_title: str
    uu_headlines: tuple[str, ...]
    uu_high_risk: str
    uu_medium_risk: str
    uu_examples_intro: str
    uu_no_issues: str
    uu_missing_alt: str
    uu_consequences: tuple[str, ...]
    speed_title: str
    speed_headlines: tuple[str, ...]
    speed_many_images: str
    speed_many_scripts: str
    speed_no_obvious_issues: str
    speed_consequences: tuple[str, ...]
    aeo_title: str
    aeo_headlines: tuple[str, ...]
    aeo_no_schema: str
    aeo_no_faq: str
    aeo_thin_qa: str
    aeo_consequences: tuple[str, ...]

    # Part 3
    summary_title: str
    findings_intro: tuple[str, str]
    findings: tuple[str, ...]
    offer_title: str
    offers: tuple[str, ...]


NORWEGIAN = ReportCopy(
    keyword_placeholder="din tjeneste",
    region_placeholder="ditt område",
    best_qualifier="beste",
    price_word="pris",
    score_labels={
        ScoreLabel.HIGH: "høy",
        ScoreLabel.MEDIUM: "middels",
        ScoreLabel.MEDIUM_WEAK: "middels / svak",
        ScoreLabel.WEAK: "svak",
    },
    visibility_labels={
        Visibility.MEDIUM_GOOD: "Middels–god",
        Visibility.MEDIUM_WEAK: "Middels–svak",
        Visibility.WEAK: "Svak",
    },
    ranking_reasons={
        RankingReason.NO_CONTENT: "ingen egen tekst / lite relevant innhold",
        RankingReason.LIMITED_CONTENT: "begrenset innhold og lite strukturert data",
        RankingReason.SOME_CONTENT: (
            "har noe innhold, men kan styrkes med mer faglig tekst og tydelig struktur"
        ),
    },
    contrast_example_formats={
        ContrastExampleKind.CLASS: 'klasse: {value} (i "{context}...")',
        ContrastExampleKind.INLINE_STYLE: "fargekode: {value}",
        ContrastExampleKind.BODY_RULE: "body-tekstfarge: {value} definert i CSS",
    },
    ranking_title=(
        "Realistisk rangering i Google for nettstedet "
        "(basert på innholdet, ikke faktiske målinger)"
    ),
    ranking_header=("Søkeord", "Forventet synlighet", "Hvorfor"),
    part_heading="Del {number}",
    score_intro=("Din side ({url})", "har fått en SEO‑score på"),
    weak_ranking_intro="Nettsiden {url} rangerer trolig svakt på bransjesøk som",
    weak_phrases_with_city=(
        '"{keyword} {city}", "{best} {keyword} {city}", "{best} {keyword} {region}".'
    ),
    weak_phrases_without_city=(
        '"{keyword} {region}", "{best} {keyword} {region}" og "{keyword} {price} {region}".'
    ),
    problems_title="Hvorfor {url} scorer dårlig i søkemotorene",
    why_heading="Hvorfor?",
    consequences_heading="Hva kan skje?",
    seo_title="1 / SEO",
    seo_headlines=(
        "Google forstår ikke hva dette selskapet tilbyr",
        "Dårlig SEO som Google ikke liker",
        "Google sliter å forstå innholdet og viktige tema på nettsiden deres",
    ),
    seo_no_schema="Mangler strukturert data (schema)",
    seo_little_text="Lite relevant og forklarende tekst (ca. {length} tegn)",
    seo_no_service_headings=(
        "Få relevante tjeneste-overskrifter som treffer det folk faktisk søker på"
    ),
    seo_no_nav="Ingen tydelig navigasjonsmeny som hjelper Google å finne undersidene",
    seo_consequences=(
        "Google prioriterer konkurrerende sider med bedre struktur og innhold",
        'Lav synlighet og færre kunder fra søk som "{keyword} {place}"',
    ),
    uu_title="2 / Universell utforming",
    uu_headlines=(
        "Brudd på UU = potensielle bøter",
        "Dårlig kontrast gir dårligere Google‑score",
        "Kunder går glipp av viktig informasjon som følge av dårlig kontrast",
    ),
    uu_high_risk="Mange tegn på svak kontrast (lys tekst på lys bakgrunn)",
    uu_medium_risk="Flere eksempler på lys tekst som kan være vanskelig å lese",
    uu_examples_intro="Eksempler på potensielt problematisk tekstfarge/klasse:",
    uu_no_issues="Ingen tydelige kontrastfeil i en enkel automatisk sjekk",
    uu_missing_alt="{count} bilde(r) mangler alternativ tekst (alt) for skjermlesere",
    uu_consequences=(
        "Dårlig kontrast skaper irritasjon hos brukerne",
        "Gjør det vanskelig, om ikke umulig, for eldre og svaksynte å lese innholdet",
        "Hvis dere kjører annonser, kan det bli dyrere fordi siden konverterer dårligere",
        "Kan i verste fall gi bøter fra UU-tilsynet",
    ),
    speed_title="3 / Page Speed",
    speed_headlines=(
        "Lav page speed gir utålmodige kunder",
        "Lav page speed = lavere rangering på Google",
        "Din PageSpeed er svak, kunder mister tålmodigheten",
    ),
    speed_many_images=(
        "Siden har mange bilder ({count} stk) som kan være store i filstørrelse "
        "(anbefalt < 100KB)"
    ),
    speed_many_scripts=(
        "Det lastes inn mange JavaScript-filer ({count} scripts), som kan forsinke innlasting"
    ),
    speed_no_obvious_issues=(
        "Ingen åpenbare tegn på ekstremt tung side, men struktur og kode kan "
        "fortsatt optimaliseres"
    ),
    speed_consequences=(
        "AI‑søk (ChatGPT, CoPilot) velger ofte bort trege sider",
        "Brukerne kan miste tålmodighet hvis siden føles treg",
        "Lavere rangering på Google når PageSpeed er svakere enn konkurrentenes",
    ),
    aeo_title="4 / AEO",
    aeo_headlines=(
        "Siden dukker ikke opp i AI‑genererte svar",
        "0 FAQ = 0 AI synlighet",
        "Mangler du FAQ? Da dukker du heller ikke opp i AEO",
    ),
    aeo_no_schema="Ingen schema for “LocalBusiness” eller tilsvarende funnet",
    aeo_no_faq="Ingen FAQ eller spørsmålsbasert innhold som AI kan bruke",
    aeo_thin_qa=(
        "Det finnes noe strukturert data, men lite tydelig Q&A-innhold som passer til AI-svar"
    ),
    aeo_consequences=(
        "AI leser primært maskinlesbart innhold. Du kan risikere at siden ikke dukker opp "
        "i AI-genererte svar",
        "Konkurrenter får forspranget i nye søkekanaler hvis de har FAQ og strukturert data",
    ),
    summary_title="Hva gjør du nå?",
    findings_intro=("Hva vi fant:", "Dette nettstedet har flere svakheter som påvirker:"),
    findings=(
        "kundens synlighet i Google",
        "brukeropplevelse",
        "synlighet i AEO",
        "konverteringer",
        "risiko for brudd på norsk tilgjengelighetslov (UU)",
    ),
    offer_title="Hva vi kan tilby deg:",
    offers=(
        "Raske og sikre nettsider med data lagret i EU.",
        "Alle våre løsninger leveres med topp SEO og AEO, skrevet av mennesker.",
        "Vi sørger for at siden din oppfyller kravene for universell utforming (UU).",
        "Nettsider med strukturert data + AI‑optimalisering inkludert.",
        "Bedre konvertering og mer profesjonell presentasjon.",
    ),
)


ENGLISH = ReportCopy(
    keyword_placeholder="your service",
    region_placeholder="your area",
    best_qualifier="best",
    price_word="price",
    score_labels={
        ScoreLabel.HIGH: "high",
        ScoreLabel.MEDIUM: "medium",
        ScoreLabel.MEDIUM_WEAK: "medium / weak",
        ScoreLabel.WEAK: "weak",
    },
    visibility_labels={
        Visibility.MEDIUM_GOOD: "Medium–good",
        Visibility.MEDIUM_WEAK: "Medium–weak",
        Visibility.WEAK: "Weak",
    },
    ranking_reasons={
        RankingReason.NO_CONTENT: "no dedicated copy / little relevant content",
        RankingReason.LIMITED_CONTENT: "limited content and little structured data",
        RankingReason.SOME_CONTENT: (
            "has some content, but needs more expert copy and a clearer structure"
        ),
    },
    contrast_example_formats={
        ContrastExampleKind.CLASS: 'class: {value} (in "{context}...")',
        ContrastExampleKind.INLINE_STYLE: "colour code: {value}",
        ContrastExampleKind.BODY_RULE: "body text colour: {value} defined in CSS",
    },
    ranking_title=(
        "Realistic Google ranking for the site (based on the content, not actual measurements)"
    ),
    ranking_header=("Search term", "Expected visibility", "Why"),
    part_heading="Part {number}",
    score_intro=("Your page ({url})", "has received an SEO score of"),
    weak_ranking_intro="The site {url} probably ranks weakly for industry searches like",
    weak_phrases_with_city=(
        '"{keyword} {city}", "{best} {keyword} {city}", "{best} {keyword} {region}".'
    ),
    weak_phrases_without_city=(
        '"{keyword} {region}", "{best} {keyword} {region}" and "{keyword} {price} {region}".'
    ),
    problems_title="Why {url} scores poorly in search engines",
    why_heading="Why?",
    consequences_heading="What can happen?",
    seo_title="1 / SEO",
    seo_headlines=(
        "Google does not understand what this company offers",
        "Poor SEO that Google does not like",
        "Google struggles to understand the content and key topics of your site",
    ),
    seo_no_schema="Missing structured data (schema)",
    seo_little_text="Little relevant, explanatory copy (about {length} characters)",
    seo_no_service_headings="Few service headings matching what people actually search for",
    seo_no_nav="No clear navigation menu helping Google find the subpages",
    seo_consequences=(
        "Google prioritises competing pages with better structure and content",
        'Low visibility and fewer customers from searches like "{keyword} {place}"',
    ),
    uu_title="2 / Accessibility",
    uu_headlines=(
        "Accessibility violations = potential fines",
        "Poor contrast gives a worse Google score",
        "Customers miss important information because of poor contrast",
    ),
    uu_high_risk="Many signs of weak contrast (light text on a light background)",
    uu_medium_risk="Several examples of light text that may be hard to read",
    uu_examples_intro="Examples of potentially problematic text colours/classes:",
    uu_no_issues="No obvious contrast errors in a simple automated check",
    uu_missing_alt="{count} image(s) have no alternative text (alt) for screen readers",
    uu_consequences=(
        "Poor contrast irritates users",
        "Makes the content hard, if not impossible, to read for older and visually "
        "impaired visitors",
        "If you run ads, they can get more expensive because the page converts worse",
        "Can, in the worst case, lead to fines from the accessibility authority",
    ),
    speed_title="3 / Page Speed",
    speed_headlines=(
        "Low page speed makes customers impatient",
        "Low page speed = lower ranking on Google",
        "Your PageSpeed is weak, customers lose patience",
    ),
    speed_many_images=(
        "The page has many images ({count}) that may be large in file size "
        "(recommended < 100KB)"
    ),
    speed_many_scripts=(
        "Many JavaScript files are loaded ({count} scripts), which can delay loading"
    ),
    speed_no_obvious_issues=(
        "No obvious signs of an extremely heavy page, but structure and code can "
        "still be optimised"
    ),
    speed_consequences=(
        "AI search (ChatGPT, Copilot) often skips slow pages",
        "Users may lose patience if the page feels slow",
        "Lower Google ranking when PageSpeed is weaker than competitors'",
    ),
    aeo_title="4 / AEO",
    aeo_headlines=(
        "The page does not show up in AI-generated answers",
        "0 FAQ = 0 AI visibility",
        "Missing an FAQ? Then you won't show up in AEO either",
    ),
    aeo_no_schema="No “LocalBusiness” or similar schema found",
    aeo_no_faq="No FAQ or question-based content that AI can use",
    aeo_thin_qa=(
        "There is some structured data, but little clear Q&A content suited to AI answers"
    ),
    aeo_consequences=(
        "AI mainly reads machine-readable content. The page risks not appearing "
        "in AI-generated answers",
        "Competitors get a head start in new search channels if they have FAQ and "
        "structured data",
    ),
    summary_title="What do you do now?",
    findings_intro=("What we found:", "This site has several weaknesses affecting:"),
    findings=(
        "the customer's visibility in Google",
        "user experience",
        "visibility in AEO",
        "conversions",
        "risk of breaching accessibility law",
    ),
    offer_title="What we can offer you:",
    offers=(
        "Fast and secure websites with data stored in the EU.",
        "All our solutions ship with top SEO and AEO, written by humans.",
        "We make sure your site meets accessibility requirements.",
        "Websites with structured data + AI optimisation included.",
        "Better conversion and a more professional presentation.",
    ),
)


COPY_BY_LANGUAGE: dict[ReportLanguage, ReportCopy] = {
    ReportLanguage.NB: NORWEGIAN,
    ReportLanguage.EN: ENGLISH,
}


def get_copy(language: ReportLanguage | str = ReportLanguage.NB) -> ReportCopy:
    """Copy for a language, raising ValueError for unknown codes."""
    return COPY_BY_LANGUAGE[ReportLanguage(language)]
