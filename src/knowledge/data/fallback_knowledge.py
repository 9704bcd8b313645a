FALLBACK_KNOWLEDGE = {
    "terms": [
        {
            "term": "Arey Baboi",
            "literal_meaning": "Oh my God",
            "emotional_intent": "Shock / frustration / disbelief",
            "social_appropriateness": "Informal only",
            "formality_level": "informal",
            "regional_variations": [],
        },
        {
            "term": "Doola Teerinda?",
            "literal_meaning": "Are you out of your mind?",
            "emotional_intent": "Anger / scolding",
            "social_appropriateness": "Use only among close relations",
            "formality_level": "informal",
        },
        {
            "term": "Taggede Le",
            "literal_meaning": "I won't step back",
            "emotional_intent": "Confidence / motivation",
            "social_appropriateness": "Often used humorously",
            "formality_level": "informal",
        },
        {
            "term": "Lite Teesko",
            "literal_meaning": "Don't worry about it",
            "emotional_intent": "Comfort / casual dismissal",
            "social_appropriateness": "Casual conversations",
            "formality_level": "informal",
        },
        {
            "term": "Chala Scene Undi",
            "literal_meaning": "Too much drama",
            "emotional_intent": "Sarcasm",
            "social_appropriateness": "Youth slang",
            "formality_level": "informal",
        },
    ],
    "dishes": [
        {
            "name": "Punugulu",
            "city": "Visakhapatnam",
            "spice_level": "medium",
            "best_time": "Evening",
            "description": "Deep-fried lentil balls, crispy outside and soft inside",
            "cultural_significance": "Popular evening snack near beach areas",
        },
        {
            "name": "Bongulo Chicken",
            "city": "Visakhapatnam",
            "spice_level": "high",
            "best_time": "Evening",
            "description": "Spicy chicken preparation with coastal flavors",
            "cultural_significance": "Coastal Andhra specialty with seafood influence",
        },
        {
            "name": "Idli with Karam",
            "city": "Vijayawada",
            "spice_level": "high",
            "best_time": "Morning",
            "description": "Steamed rice cakes with spicy powder",
            "cultural_significance": "Traditional breakfast combining comfort with spice",
        },
        {
            "name": "Chicken Pakodi",
            "city": "Vijayawada",
            "spice_level": "medium",
            "best_time": "Evening",
            "description": "Spiced chicken fritters",
            "cultural_significance": "Popular evening snack in Krishna district",
        },
        {
            "name": "Mirchi Bajji",
            "city": "Guntur",
            "spice_level": "extreme",
            "best_time": "Evening",
            "description": "Stuffed chili fritters",
            "cultural_significance": "Guntur's signature dish showcasing extreme spice tolerance",
        },
        {
            "name": "Gongura Pachadi",
            "city": "Guntur",
            "spice_level": "high",
            "best_time": "Lunch",
            "description": "Tangy sorrel leaves chutney",
            "cultural_significance": "Guntur's pride, represents bold flavors",
        },
        {
            "name": "Dosa with Red Chutney",
            "city": "Tirupati",
            "spice_level": "medium",
            "best_time": "Morning",
            "description": "Crispy crepe with spicy red chutney",
            "cultural_significance": "Temple town breakfast tradition",
        },
        {
            "name": "Laddu",
            "city": "Tirupati",
            "spice_level": "low",
            "best_time": "Any",
            "description": "Sweet gram flour balls",
            "cultural_significance": "Sacred temple prasadam, spiritually significant",
        },
        {
            "name": "Vegetable Biryani",
            "city": "Tirupati",
            "spice_level": "medium",
            "best_time": "Evening",
            "description": "Aromatic rice with mixed vegetables and spices",
            "cultural_significance": "Temple town vegetarian specialty for evening meals",
        },
        {
            "name": "Curd Rice",
            "city": "Tirupati",
            "spice_level": "low",
            "best_time": "Evening",
            "description": "Cooling rice with yogurt and mild tempering",
            "cultural_significance": "Temple town comfort food, perfect for evening",
        },
    ],
    "festivals": [
        {
            "name": "Sankranti",
            "cultural_meaning": "Harvest festival celebrating the transition of seasons and agricultural abundance",
            "associated_foods": ["Ariselu", "Pongal"],
            "food_symbolism": "Ariselu represents prosperity, Pongal symbolizes gratitude to nature",
            "emotional_tone": "Family bonding and gratitude",
            "regional_variations": [
                {
                    "region": "coastal",
                    "variation": "More emphasis on seafood preparations alongside traditional sweets",
                },
                {
                    "region": "rayalaseema",
                    "variation": "Focus on simple, rustic preparations with local grains",
                },
            ],
        },
        {
            "name": "Ugadi",
            "cultural_meaning": "Telugu New Year symbolizing new beginnings and the balance of life experiences",
            "associated_foods": ["Ugadi Pachadi"],
            "food_symbolism": "Six tastes represent the full spectrum of life experiences - sweet, sour, salty, bitter, spicy, and astringent",
            "emotional_tone": "Hope and renewal",
        },
        {
            "name": "Vinayaka Chavithi",
            "cultural_meaning": "Ganesh worship celebrating wisdom, prosperity, and removal of obstacles",
            "associated_foods": ["Modakam"],
            "food_symbolism": "Modakam represents the sweetness of devotion and Lord Ganesha's favorite offering",
            "emotional_tone": "Joy and community celebration",
        },
    ],
    "mood_mappings": [
        {
            "mood": "sad",
            "recommended_food": "Pappu with Avakaya",
            "emotional_logic": "Comfort food that brings nostalgia and warmth, like mother's cooking",
            "home_or_street": "home",
        },
        {
            "mood": "sick",
            "recommended_food": "Rasam",
            "emotional_logic": "Light, healing properties with digestive benefits and warmth",
            "home_or_street": "home",
        },
        {
            "mood": "happy",
            "recommended_food": "Biryani",
            "emotional_logic": "Celebratory dish that represents abundance and festive mood",
            "home_or_street": "both",
        },
        {
            "mood": "angry",
            "recommended_food": "Curd Rice",
            "emotional_logic": "Cooling effect that calms the mind and reduces heat in the body",
            "home_or_street": "home",
        },
        {
            "mood": "tired",
            "recommended_food": "Coffee with Punugulu",
            "emotional_logic": "Energy boost from caffeine combined with satisfying evening snack",
            "home_or_street": "street",
        },
    ],
}
