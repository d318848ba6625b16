"""Research prompt templates.

Every prompt is a pure function of its inputs, so identical requests map to
identical cache keys.
"""

from whoisrunning.domain.dtos.research_dto import (
    CandidateSearchFilters,
    ResearchPurpose,
    ResearchRequest,
)
from whoisrunning.domain.value_objects.demographic_profile import DemographicProfile


TRENDING_QUERY = (
    "List the top 5 most talked about political candidates in the news right now "
    "in the United States. Include their name, party, office they're running for or "
    "currently hold, state, and why they're trending."
)

WINNERS_QUERY = (
    "List 5 recent winners of significant political races in the United States "
    "from the past 6 months. Include their name, party, the office they won, state, "
    "election date, and vote percentage if available."
)

CANDIDATE_FIELDS_SUFFIX = (
    ". For each candidate provide: full name, political party, office they're "
    "running for, current position (if any), 3-5 key political positions/ideology "
    "tags, brief bio (2-3 sentences), website URL if available, and recent news."
)
CANDIDATE_SEARCH_CONTEXT = "Format the response as a structured list of candidates."

PROFILE_QUERY = (
    "Provide a comprehensive profile including: political party, current office or "
    "race, voting record highlights if applicable, education and career background, "
    "and recent news."
)
IDEOLOGY_QUERY = (
    "What are the key ideological positions and political philosophy? List specific "
    "policy stances on: healthcare, economy, climate/environment, education, criminal "
    "justice, immigration. Also provide 2-3 notable quotes with sources and dates."
)
RESOURCES_QUERY = (
    "Find recent interviews, speeches, debates, or campaign videos with YouTube links. "
    "Also find recent news articles from major publications."
)


def trending_request() -> ResearchRequest:
    return ResearchRequest(query=TRENDING_QUERY)


def winners_request() -> ResearchRequest:
    return ResearchRequest(query=WINNERS_QUERY)


def candidate_search_request(filters: CandidateSearchFilters) -> ResearchRequest:
    """Search by name, or by office and location when no name is given."""
    if filters.name:
        query = f"Find information about political candidate {filters.name}"
    else:
        query = "List current political candidates"
        if filters.office:
            query += f" running for {filters.office}"
        if filters.city:
            query += f" in {filters.city}"
        if filters.county:
            query += f" in {filters.county} County"
        if filters.state:
            query += f" in {filters.state}"
    return ResearchRequest(
        query=query + CANDIDATE_FIELDS_SUFFIX,
        context=CANDIDATE_SEARCH_CONTEXT,
    )


def profile_request(name: str) -> ResearchRequest:
    return ResearchRequest(query=PROFILE_QUERY, candidate_name=name)


def ideology_request(name: str) -> ResearchRequest:
    return ResearchRequest(query=IDEOLOGY_QUERY, candidate_name=name)


def resources_request(name: str) -> ResearchRequest:
    return ResearchRequest(query=RESOURCES_QUERY, candidate_name=name)


def politicians_request(location: str) -> ResearchRequest:
    """Currently serving officials for a location such as "Austin, Travis County, Texas"."""
    query = f"""List ALL current elected officials serving in {location}. Include:
- U.S. Senators (if state level)
- U.S. House Representatives (district specific)
- Governor (if state level)
- State Senators and Representatives (if city/county provided)
- Mayor (if city provided)
- County Commissioners or Board Members (if county provided)
- City Council members (if city provided)

For each official provide:
1. Full name
2. Exact office/title
3. Political party

Format as a numbered list. Focus on currently serving officials, not candidates."""
    return ResearchRequest(query=query, purpose=ResearchPurpose.OFFICIALS)


def policy_impact_request(profile: DemographicProfile) -> ResearchRequest:
    """Analysis of the seven policy areas for a demographic profile."""
    location = profile.location.display()
    query = f"""Analyze how local and state policies in {location} specifically impact people with these demographics:
- Age: {profile.age_range.value} years old
- Income: {profile.income_range.label}
- Race/Ethnicity: {profile.race_ethnicity.value}
- Education: {profile.education_level.value}

Focus on these policy areas and explain how current policies affect this demographic group:

1. **Tax Policies**: State income tax, property tax, sales tax - how do rates and exemptions affect someone in this income bracket and location?

2. **Education**: School funding, public education quality, college affordability programs, scholarships - how does this impact families or individuals at this age and education level?

3. **Healthcare**: Healthcare access, Medicaid eligibility, insurance costs, health programs - what's available for someone at this income level and age?

4. **Housing**: Rent control, property taxes, housing assistance programs, zoning laws - how affordable is housing for this income bracket in this area?

5. **Employment**: Minimum wage laws, worker protections, job training programs, unemployment benefits - what protections and opportunities exist?

6. **Transportation**: Public transit access, infrastructure quality, commute costs - what options and costs exist for someone at this income level?

7. **Social Services**: Food assistance, childcare support, senior programs, disability services - what programs are available based on age, income, and location?

For each policy area:
- Name the specific policy or program
- Explain how it directly affects someone with these exact demographics
- Include dollar amounts, percentages, or concrete impacts when possible
- Mention any recent changes
- Be specific to {location}

Focus on factual, objective impacts without political bias. Cite sources where possible."""
    return ResearchRequest(query=query, purpose=ResearchPurpose.POLICY_IMPACT)
