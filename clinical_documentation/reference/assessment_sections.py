"""
Assessment Section Reference Data

Ordered section/field schemas for the two assessment types. The field ids
are the keys of an AssessmentFieldMap; labels are rendered into the
assessment prompt; scripts are the interview prompts a clinician reads
while filling in the form.

Author: Shubham Singh
Date: December 2025
"""

from typing import Dict, List, Tuple

from clinical_documentation.core.enums import AssessmentType
from clinical_documentation.core.models import AssessmentField, AssessmentSection


def _section(section_id: str, title: str, *field_triples: Tuple[str, str, str]) -> AssessmentSection:
    return AssessmentSection(
        id=section_id,
        title=title,
        fields=tuple(AssessmentField(id=f, label=label, script=script) for f, label, script in field_triples),
    )


# =============================================================================
# STAGE 1: INITIAL ASSESSMENT (5 SECTIONS)
# =============================================================================

INITIAL_ASSESSMENT_SECTIONS: Tuple[AssessmentSection, ...] = (
    _section(
        "presentingProblem",
        "I. Presenting Problem",
        ("description", "Description (in client's own words)",
         "What brings you in to see us today? Can you describe the problem you're "
         "experiencing in your own words?"),
        ("immediateConcerns", "Immediate concerns/symptoms",
         "What are your immediate concerns or symptoms related to this problem?"),
    ),
    _section(
        "riskOfHarm",
        "II. Risk of Harm",
        ("suicidalIdeation", "Suicidal ideation (thoughts, plans, intent, access to means)",
         'Have you been having any thoughts of harming yourself? (If yes, explore further: '
         '"What kind of thoughts?", "Have you had any specific plans?", "Do you have the '
         'means to carry out these plans?", "What is your intent?")'),
        ("homicidalIdeation", "Homicidal ideation (thoughts, plans, intent, access to means)",
         'Have you been having any thoughts of harming others? (If yes, explore further: '
         '"What kind of thoughts?", "Have you had any specific plans?", "Do you have the '
         'means to carry out these plans?", "What is your intent?")'),
        ("selfHarm", "Self-harm behaviors",
         "Have you engaged in any self-harm behaviors recently, such as cutting, burning, "
         "or other forms of self-injury? (If yes, explore frequency, severity, and methods)."),
        ("otherRisks", "Other risks",
         "Are there any other risks to your safety or the safety of others that we should "
         "be aware of? (Explore domestic violence, unsafe living situations, etc.)"),
    ),
    _section(
        "substanceUse",
        "III. Substance Use",
        ("type", "Type of substance", "What substances have you been using?"),
        ("frequency", "Frequency of use", "For each substance, how often do you use it?"),
        ("quantity", "Quantity used",
         "For each substance, how much do you typically use at one time?"),
        ("lastUse", "Date of last use", "When was the last time you used each substance?"),
    ),
    _section(
        "treatmentHistory",
        "IV. Treatment History",
        ("type", "Type of treatment",
         "What type of treatment did you receive? (Inpatient, outpatient, detox, therapy, etc.)"),
        ("provider", "Provider", "Who was your treatment provider?"),
        ("dates", "Dates of treatment", "What were the dates of your treatment?"),
    ),
    _section(
        "medicalHistory",
        "V. Medical History and Exam",
        ("conditions", "Current medical conditions", "Do you have any current medical conditions?"),
        ("medications", "Current medications",
         "Are you currently taking any medications, including prescription, over-the-counter, "
         "and herbal supplements?"),
        ("allergies", "Allergies",
         "Do you have any allergies to medications, food, or other substances?"),
        ("recentExams", "Recent medical exams/hospitalizations",
         "Have you had any recent medical exams or hospitalizations?"),
        ("mse", "Mental Status Exam (brief observations)",
         "(Throughout the assessment, observe and document the following): Appearance, "
         "Behavior, Mood, Speech, Thought process, Thought content, Cognition, Insight, Judgment."),
    ),
)


# =============================================================================
# STAGE 2: COMPREHENSIVE ASSESSMENT (16 SECTIONS)
# =============================================================================

COMPREHENSIVE_ASSESSMENT_SECTIONS: Tuple[AssessmentSection, ...] = (
    _section(
        "presentingProblem",
        "II-A. Presenting Problem (Expanded)",
        ("contributingFactors", "Contributing factors",
         "Let's explore some of the things that might be contributing to [the presenting "
         "problem]. Can you tell me more about [specific biological, psychological, social, "
         "developmental, or spiritual factors relevant to the client]?"),
        ("symptomsAndSeverity", "Specific symptoms and severity",
         "Let's go through each of the symptoms you mentioned. How often have you been "
         "experiencing [symptom] lately? How intense has it been? How does it affect your "
         "day-to-day life?"),
        ("impactOnLife", "Impact on daily life",
         "How is [the presenting problem] impacting your work/school, your relationships, "
         "your ability to take care of yourself, and your ability to enjoy things?"),
        ("clientGoals", "Client's goals for treatment",
         "We talked about your goals for treatment last time. Are those goals still the "
         "same, or have they changed?"),
        ("associatedRisks", "Associated risks",
         "Let's revisit your risk assessment. Have you had any thoughts of harming yourself "
         "or others since we last met?"),
    ),
    _section(
        "riskOfHarm",
        "II-B. Risk of Harm to Self and Others (Expanded)",
        ("pastHistory", "Past history of suicidal/homicidal behavior",
         "We talked briefly about [past suicide attempts/violent incidents/self-harm] last "
         "time. Can you tell me more about each of those times?"),
        ("currentIdeation", "Current ideation, plans, intent, access to means",
         "Have you had any thoughts of harming yourself or others recently? (If yes, follow "
         "up with detailed risk assessment questions)."),
        ("protectiveFactors", "Protective factors",
         "What are some things that help you stay safe when you're feeling overwhelmed or "
         "having thoughts of harming yourself/others?"),
        ("contextAndTriggers", "Context and triggers for risky behaviors",
         "Let's try to identify specific situations, feelings, or thoughts that tend to "
         "trigger these thoughts or behaviors."),
    ),
    _section(
        "substanceUse",
        "II-C. Use of Alcohol or Drugs (Expanded)",
        ("ageOfOnset", "Age of onset",
         "For each substance you've used, how old were you when you first tried it, started "
         "using regularly, and felt it became a problem?"),
        ("patternsOfUse", "Patterns of use (frequency, quantity, duration)",
         "Can you describe how your use of [substance] has changed over time? How much? How "
         "often? How do you use it?"),
        ("periodsOfAbstinence", "Periods of abstinence",
         "Have there been times when you've stopped using completely? How long did those "
         "periods last? What led you to start again?"),
        ("consequences", "Consequences of use",
         "How has your use affected your physical health, mental health, relationships, "
         "work/school, finances, or led to legal problems?"),
        ("withdrawalHistory", "History of withdrawal symptoms",
         "Have you ever experienced any withdrawal symptoms when you've tried to cut down or "
         "stop using?"),
        ("withdrawalRisks", "Potential withdrawal risks",
         "(Clinician's assessment of potential withdrawal risks)"),
    ),
    _section(
        "treatmentHistory",
        "II-D. Treatment History for Mental Illness and/or Substance Use (Expanded)",
        ("typesReceived", "Types of treatment received",
         "Let's make a complete list of all the mental health and substance use treatment "
         "you've received (therapy, medication, hospitalizations, etc.)."),
        ("providers", "Providers",
         "Can you tell me the names and contact information for all of your past and current "
         "providers?"),
        ("helpfulUnhelpful", "Helpful and unhelpful aspects of past treatment",
         "Thinking back on your past treatment experiences, what did you find most helpful? "
         "What was unhelpful?"),
        ("barriers", "Barriers to successful treatment",
         "What, if anything, has made it difficult for you to get the help you need or to "
         "stick with treatment in the past?"),
    ),
    _section(
        "medicalHistory",
        "II-E. Medical History (Expanded)",
        ("conditions", "Current and past medical conditions",
         "Let's go over your medical history in more detail. Can you tell me about any "
         "current or past medical conditions you've had?"),
        ("medications", "Medications",
         "Can you give me a complete list of all the medications you're currently taking, "
         "including over-the-counter and herbal remedies?"),
        ("allergies", "Allergies",
         "Do you have any allergies to medications, foods, or anything in the environment?"),
        ("surgeries", "Surgeries",
         "Have you ever had any surgeries? If so, can you tell me when they were and what "
         "they were for?"),
        ("hospitalizations", "Hospitalizations",
         "Have you ever been hospitalized for any reason, either medical or psychiatric?"),
        ("pregnancy", "History of pregnancy",
         "(If applicable) Have you ever been pregnant? What were the outcomes?"),
        ("familyHistory", "Relevant family medical history",
         "Does anyone in your family have a history of medical conditions that might be "
         "relevant?"),
    ),
    _section(
        "physicalExam",
        "II-F. Physical Examination (Expanded)",
        ("mse", "Mental Status Exam (detailed observations)",
         "Detailed observations of: Appearance, Behavior, Speech, Mood, Affect, Thought "
         "process, Thought content, Perception, Cognition, Insight, Judgment."),
        ("referral", "Referral for physical examination (if needed)",
         "If indicated, refer the client to a physician for a physical examination and any "
         "necessary laboratory tests."),
    ),
    _section(
        "homeAtmosphere",
        "II-G. Home Atmosphere",
        ("livingSituation", "Living situation",
         "Can you describe your current living situation? What type of housing do you live in?"),
        ("relationships", "Quality of relationships with household members",
         "Who lives with you? How would you describe your relationships with them?"),
        ("safety", "Safety and stability of the environment",
         "Do you feel safe in your home? Are there any weapons, substances, or violence present?"),
        ("stressors", "Stressors in the home environment",
         "What are some of the biggest stressors in your home environment (financial, "
         "conflicts, etc.)?"),
    ),
    _section(
        "educationHistory",
        "II-H. Educational History",
        ("level", "Highest level of education completed",
         "What is the highest level of school you have finished?"),
        ("disabilities", "Learning disabilities",
         "Have you ever been diagnosed with a learning disability or had any difficulties "
         "with learning in school?"),
        ("performance", "Academic performance",
         "How would you describe your grades, attendance, and behavior in school?"),
        ("experiences", "Significant experiences in school",
         "What were some of your positive and negative experiences in school? Relationships "
         "with teachers/peers? Bullying?"),
    ),
    _section(
        "employmentHistory",
        "II-I. Employment History",
        ("status", "Current employment status",
         "Are you currently working, a student, retired, or something else?"),
        ("jobTypes", "Types of jobs held", "Can you tell me about the different jobs you've had?"),
        ("duration", "Duration of employment", "How long did you work at each job?"),
        ("reasonsForLeaving", "Reasons for leaving jobs", "Why did you leave each of those jobs?"),
        ("stressors", "Work-related stressors",
         "What are some of the biggest stressors you've experienced in your work?"),
    ),
    _section(
        "militaryHistory",
        "II-J. Military History",
        ("branch", "Branch of service", "What branch of the military were you in?"),
        ("dates", "Dates of service", "When did you serve?"),
        ("combat", "Combat experience", "Did you see combat?"),
        ("trauma", "Trauma experienced during service",
         "Did you experience any traumatic events during your service?"),
        ("discharge", "Discharge status", "What was your discharge status?"),
    ),
    _section(
        "legalInvolvement",
        "II-K. Legal Involvement",
        ("arrests", "Arrests",
         "Have you ever been arrested? If so, can you tell me about the circumstances?"),
        ("convictions", "Convictions", "Have you ever been convicted of a crime?"),
        ("incarcerations", "Incarcerations",
         "Have you ever been incarcerated? If so, when and for how long?"),
        ("probation", "Probation/parole",
         "Are you currently on probation or parole? What are the conditions?"),
    ),
    _section(
        "financial",
        "II-L. Financial and Social Services",
        ("income", "Income", "What are your sources and amount of income?"),
        ("expenses", "Expenses", "What are your major monthly expenses?"),
        ("debts", "Debts", "Do you have any debts (credit card, student loans, medical bills)?"),
        ("resources", "Access to resources",
         "Do you feel like you have enough money to meet your basic needs (food, housing, "
         "healthcare)?"),
        ("socialServices", "Involvement with social services",
         "Are you currently receiving any assistance from social service agencies (welfare, "
         "food stamps, etc.)?"),
    ),
    _section(
        "familyHistoryMH",
        "II-M. Family History of Mental Illness/Substance Use",
        ("mhSuInFamily", "Mental illness/substance use in family members",
         "Does anyone in your family have a history of mental health or substance use problems?"),
        ("diagnoses", "Specific diagnoses",
         "Do you know the specific diagnoses of any family members?"),
        ("dynamics", "Family Dynamics",
         "How would you describe the way your family communicates and resolves conflicts?"),
    ),
    _section(
        "traumaHistory",
        "II-N. History of Trauma",
        ("types", "Types of trauma experienced",
         "(Use a sensitive, trauma-informed approach). Many people have experienced difficult "
         "events like abuse, neglect, witnessing violence, accidents, etc. Have you ever "
         "experienced anything like that?"),
        ("impact", "Impact of trauma on current functioning",
         "How do you think these experiences have affected you (e.g., flashbacks, nightmares, "
         "avoidance, relationships)?"),
    ),
    _section(
        "assets",
        "II-O. Client's Assets, Vulnerabilities, and Supports",
        ("strengths", "Strengths",
         "What are some things you're proud of about yourself? What are you good at?"),
        ("resources", "Resources",
         "Do you have stable housing, transportation, education, employment?"),
        ("copingSkills", "Coping skills",
         "What are some things you do to cope with stress or difficult emotions (both healthy "
         "and unhealthy)?"),
        ("socialSupports", "Social supports",
         "Who are the important people in your life? Who can you rely on for support?"),
        ("vulnerabilities", "Vulnerabilities/challenges",
         "What are some of the current biggest challenges you face?"),
    ),
    _section(
        "summary",
        "II-P. Clinical Impression and Summary",
        ("keyFindings", "Key findings",
         "(Clinician's summary of the most important findings from the assessment)."),
        ("dxConsiderations", "Diagnostic considerations",
         "(List applicable diagnoses with justification, rule-outs, and differential diagnosis)."),
        ("treatmentNeeds", "Potential treatment needs",
         "(Recommended level of care, specific interventions, and referrals)."),
        ("prognosis", "Prognosis", "(Clinician's assessment of prognosis)."),
    ),
)


# =============================================================================
# STAGE 3: LOOKUP BY ASSESSMENT TYPE
# =============================================================================

_SECTIONS_BY_TYPE: Dict[AssessmentType, Tuple[AssessmentSection, ...]] = {
    AssessmentType.INITIAL: INITIAL_ASSESSMENT_SECTIONS,
    AssessmentType.COMPREHENSIVE: COMPREHENSIVE_ASSESSMENT_SECTIONS,
}


def assessment_sections_for(assessment_type) -> List[AssessmentSection]:
    """Ordered section schema for an assessment type (member or label)."""
    return list(_SECTIONS_BY_TYPE[AssessmentType.from_string(assessment_type)])
