
# GitHub issue text for mentor sign-up

def get_mentor_issue_title(event_name: str, location_name: str) -> str:
    return f"Mentor Registration: {event_name} at {location_name}"


def get_mentor_issue_body(location_name: str, date: str, time: str) -> str:
    return f"""Hey everyone! :wave:

We are organizing our next NodeSchool event at **{location_name}** on **{date}** from **{time}**.

We need mentors to help attendees work through the workshoppers.
If you would like to mentor, please comment on this issue with:

1. The workshoppers you are comfortable mentoring
2. Whether you can arrive 30 minutes early to help set up

Thank you for helping the community learn! :heart:
"""
