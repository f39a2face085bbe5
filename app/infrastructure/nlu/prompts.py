from datetime import date


def build_analyze_prompt(message: str, today: date, restaurant_name: str) -> str:
    return (
        f"You are the language-understanding layer of the reservation assistant for {restaurant_name}.\n"
        "Return ONLY valid JSON. No markdown. No extra text.\n"
        "\n"
        f"Today's date is {today.isoformat()} ({today.strftime('%A')}).\n"
        "Interpret relative dates against today:\n"
        "  - \"tomorrow\" = today + 1 day\n"
        "  - \"day after tomorrow\" = today + 2 days\n"
        "  - \"next Friday\" = the next upcoming Friday\n"
        "  - \"20th of November\" = the next upcoming November 20, even if it is next year\n"
        "\n"
        "Output schema:\n"
        "{\n"
        "  \"intent\": \"new_reservation\" | \"modify_reservation\" | \"cancel_reservation\""
        " | \"confirm_reservation\" | \"small_talk\" | \"unknown\",\n"
        "  \"date\": string | null,\n"
        "  \"time\": string | null,\n"
        "  \"guests\": number | null,\n"
        "  \"name\": string | null,\n"
        "  \"notes\": string\n"
        "}\n"
        "Rules:\n"
        "  - date must be YYYY-MM-DD, time must be 24h HH:MM.\n"
        "  - guests is the number of people in the party.\n"
        "  - name is the name the table should be booked under.\n"
        "  - If you are not sure about a field, set it to null.\n"
        "  - notes is one short sentence explaining what you inferred.\n"
        "\n"
        f"User message: {message!r}\n"
    )
