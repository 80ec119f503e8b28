itinerary_prompt = """You are a travel planning AI.
City: {city}
Weather: {weather}
User Preferences: {preferences}
Candidate activities: {activity_options}

Create a detailed 3-day itinerary. Decide the order, suggest alternatives if needed, and explain reasoning for each choice.
"""
