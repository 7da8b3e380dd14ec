"""Prompt templates and static text used around trip generation."""

DEFAULT_DESCRIPTION = "calm, scenic, nature-focused getaway"

TRIP_SYSTEM_PROMPT = (
    "You are a concise travel planner AI. "
    "From the user description, infer the aesthetic (mountain, beach, city, desert, nightlife, etc.) "
    "and propose EXACTLY 3 real-world destinations that match the vibe. "
    "For each destination, write: 1 short line summary + 2 bullet points (Day 1, Day 2) + one total budget in INR. "
    "Keep each destination under 6 lines. Do NOT explain your reasoning, just output the plan."
)

TRIP_USER_TEMPLATE = 'User mood / aesthetic description: "{description}".'

BOOKING_LINKS = (
    "\n\nBook your trip:\n"
    '<a href="https://www.booking.com" target="_blank" rel="noopener noreferrer">Hotels on Booking.com</a>\n'
    '<a href="https://www.skyscanner.co.in" target="_blank" rel="noopener noreferrer">Flights on Skyscanner</a>\n'
)
