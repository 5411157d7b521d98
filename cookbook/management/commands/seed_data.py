user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "display_name": "John Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "display_name": "Jane Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "display_name": "Charlie Johnson"},
]

INGREDIENT_POOL = [
    ("salt", None, ""),
    ("black pepper", None, ""),
    ("olive oil", "2", "tbsp"),
    ("garlic", "3", "cloves"),
    ("red onion", "1", ""),
    ("cherry tomatoes", "250", "g"),
    ("parmesan", "50", "g"),
    ("fresh basil", "1", "bunch"),
    ("chicken breast", "2", ""),
    ("smoked paprika", "1", "tsp"),
    ("ground cumin", "1", "tsp"),
    ("yogurt", "150", "ml"),
    ("baby spinach", "100", "g"),
    ("mushrooms", "200", "g"),
    ("lemon juice", "1", "tbsp"),
    ("soy sauce", "2", "tbsp"),
    ("white rice", "1", "cup"),
    ("pasta", "300", "g"),
    ("butter", "30", "g"),
    ("plain flour", "1.5", "cups"),
    ("sugar", "0.5", "cup"),
    ("eggs", "2", ""),
    ("milk", "250", "ml"),
]

step_phrases = [
    "Prepare and measure all the ingredients.",
    "Heat the oil in a large pan over medium heat.",
    "Add the onion and garlic and cook until soft.",
    "Stir in the spices and cook for one minute.",
    "Add the main ingredients and simmer gently.",
    "Season to taste with salt and pepper.",
    "Rest for five minutes before serving.",
    "Garnish and serve warm.",
]

dish_names = [
    "Lemon Garlic Chicken",
    "Tomato Basil Pasta",
    "Mushroom Risotto",
    "Spiced Lentil Soup",
    "Spinach Omelette",
    "Honey Soy Noodles",
    "Pad Thai",
    "Banana Pancakes",
    "Paprika Roast Vegetables",
    "Creamy Yogurt Curry",
]
