"""
Built-in recipe catalog used when the provider is unavailable and for demo browsing.
"""

import logging
from typing import Dict, Iterable, List, Optional

from models.recipe import Recipe

logger = logging.getLogger(__name__)

CATALOG_DATA: List[Dict] = [
    {
        "id": "1",
        "title": "Asian Chicken Stir Fry",
        "ingredients": [
            "1 lb boneless chicken breast, cut into strips",
            "2 cups broccoli florets",
            "1 red bell pepper, sliced",
            "1 cup snap peas",
            "2 carrots, julienned",
            "3 cloves garlic, minced",
            "1 tbsp fresh ginger, grated",
            "3 tbsp soy sauce",
            "2 tbsp oyster sauce",
            "1 tbsp cornstarch",
            "2 tbsp vegetable oil",
            "1 tsp sesame oil",
            "2 green onions, chopped",
            "Cooked jasmine rice for serving",
        ],
        "instructions": [
            "Mix soy sauce, oyster sauce, and cornstarch in a small bowl.",
            "Heat vegetable oil in a large wok or skillet over high heat.",
            "Add chicken strips and cook for 5-6 minutes until golden.",
            "Add garlic and ginger, stir for 30 seconds.",
            "Add broccoli, bell pepper, carrots, and snap peas.",
            "Stir-fry for 4-5 minutes until vegetables are crisp-tender.",
            "Pour sauce over and toss to coat everything.",
            "Drizzle with sesame oil and garnish with green onions.",
            "Serve immediately over jasmine rice.",
        ],
        "readyInMinutes": 25,
        "servings": 4,
        "calories": 385.0,
        "summary": "A colorful and nutritious Asian-inspired stir fry with tender chicken and crisp vegetables.",
    },
    {
        "id": "2",
        "title": "Creamy Mushroom Pasta",
        "ingredients": [
            "12 oz fettuccine pasta",
            "1 lb mixed mushrooms (cremini, shiitake, button), sliced",
            "1 cup heavy cream",
            "1/2 cup white wine (optional)",
            "1/2 cup grated Parmesan cheese",
            "4 cloves garlic, minced",
            "1 medium onion, diced",
            "3 tbsp butter",
            "2 tbsp olive oil",
            "1/4 cup fresh parsley, chopped",
            "1/2 tsp dried thyme",
            "Salt and black pepper to taste",
        ],
        "instructions": [
            "Cook pasta according to package directions. Reserve 1 cup pasta water.",
            "Heat olive oil and 1 tbsp butter in a large skillet.",
            "Add onions and cook until translucent, about 5 minutes.",
            "Add mushrooms and cook until golden brown, 8-10 minutes.",
            "Add garlic and thyme, cook for 1 minute.",
            "Pour in wine (if using) and let it reduce by half.",
            "Add cream and bring to a gentle simmer.",
            "Stir in remaining butter and Parmesan cheese.",
            "Add cooked pasta and toss with sauce, loosening with pasta water.",
            "Season with salt and pepper, garnish with parsley.",
        ],
        "readyInMinutes": 30,
        "servings": 4,
        "calories": 520.0,
        "summary": "Rich and creamy pasta with earthy mushrooms and aromatic herbs.",
    },
    {
        "id": "3",
        "title": "Loaded Beef Tacos",
        "ingredients": [
            "1.5 lbs ground beef (80/20)",
            "12 corn tortillas",
            "1 packet taco seasoning",
            "1 cup sharp cheddar cheese, shredded",
            "2 cups iceberg lettuce, shredded",
            "3 Roma tomatoes, diced",
            "1 white onion, finely diced",
            "1 cup sour cream",
            "1 cup guacamole",
            "1/2 cup fresh cilantro, chopped",
            "2 limes, cut into wedges",
        ],
        "instructions": [
            "Brown ground beef in a large skillet over medium-high heat.",
            "Drain excess fat and add taco seasoning with 3/4 cup water.",
            "Simmer for 5-7 minutes until sauce thickens.",
            "Warm tortillas in a dry skillet or microwave.",
            "Fill each tortilla with beef mixture.",
            "Top with cheese, lettuce, tomatoes, onions, and cilantro.",
            "Serve with sour cream, guacamole, and lime wedges.",
        ],
        "readyInMinutes": 25,
        "servings": 6,
        "calories": 445.0,
        "summary": "Ultimate loaded tacos with all your favorite toppings for a family-friendly meal.",
    },
    {
        "id": "4",
        "title": "Hearty Minestrone Soup",
        "ingredients": [
            "6 cups vegetable broth",
            "1 can (28 oz) diced tomatoes",
            "2 cups kidney beans, drained and rinsed",
            "1 cup cannellini beans, drained and rinsed",
            "2 carrots, diced",
            "2 celery stalks, diced",
            "1 zucchini, diced",
            "1 yellow onion, diced",
            "4 cloves garlic, minced",
            "1 cup small pasta (ditalini or elbow)",
            "2 tbsp olive oil",
            "2 tsp dried basil",
            "1 tsp dried oregano",
        ],
        "instructions": [
            "Heat olive oil in a large pot over medium heat.",
            "Add onion, carrots, and celery. Cook for 8-10 minutes.",
            "Add garlic, basil, and oregano. Cook for 1 minute.",
            "Add diced tomatoes, broth, and both types of beans.",
            "Bring to a boil, then reduce heat and simmer for 20 minutes.",
            "Add zucchini and pasta. Cook for 10-12 minutes.",
            "Season with salt and pepper to taste.",
            "Serve hot with fresh basil and Parmesan cheese.",
        ],
        "readyInMinutes": 45,
        "servings": 6,
        "calories": 285.0,
        "summary": "A hearty Italian vegetable soup loaded with beans, pasta, and fresh herbs.",
    },
    {
        "id": "5",
        "title": "Greek Quinoa Salad",
        "ingredients": [
            "1.5 cups quinoa, rinsed",
            "3 cups water or vegetable broth",
            "1 large cucumber, diced",
            "2 cups cherry tomatoes, halved",
            "1 cup kalamata olives, pitted and halved",
            "1 cup crumbled feta cheese",
            "1/2 red onion, thinly sliced",
            "1/3 cup extra virgin olive oil",
            "3 tbsp fresh lemon juice",
            "1 tsp dried oregano",
        ],
        "instructions": [
            "Cook quinoa with water or broth according to package directions.",
            "Let quinoa cool completely in a large bowl.",
            "Add cucumber, tomatoes, olives, feta, and onion.",
            "Whisk together olive oil, lemon juice, and oregano.",
            "Pour dressing over salad and toss gently to combine.",
            "Chill for at least 30 minutes before serving.",
        ],
        "readyInMinutes": 35,
        "servings": 6,
        "calories": 340.0,
        "summary": "A refreshing Mediterranean quinoa salad packed with fresh herbs and tangy feta.",
    },
    {
        "id": "6",
        "title": "Buttermilk Pancakes",
        "ingredients": [
            "2 cups all-purpose flour",
            "3 large eggs",
            "2 cups buttermilk",
            "1/4 cup granulated sugar",
            "1 tsp baking soda",
            "1 tsp baking powder",
            "1/2 tsp salt",
            "4 tbsp unsalted butter, melted",
            "1 tsp vanilla extract",
            "Maple syrup and fresh berries for serving",
        ],
        "instructions": [
            "Whisk together flour, sugar, baking soda, baking powder, and salt.",
            "In another bowl, whisk together eggs, buttermilk, melted butter, and vanilla.",
            "Pour wet ingredients into dry ingredients and stir until just combined.",
            "Let batter rest for 5 minutes.",
            "Heat a griddle over medium heat and butter lightly.",
            "Pour 1/4 cup batter for each pancake and cook until bubbles form, 2-3 minutes.",
            "Flip and cook until golden brown, 1-2 minutes more.",
            "Serve immediately with maple syrup and fresh berries.",
        ],
        "readyInMinutes": 20,
        "servings": 4,
        "calories": 380.0,
        "summary": "Fluffy, tangy buttermilk pancakes that are perfect for weekend breakfast.",
    },
    {
        "id": "7",
        "title": "Classic Spaghetti Carbonara",
        "ingredients": [
            "1 lb spaghetti",
            "6 oz pancetta or bacon, diced",
            "4 large egg yolks",
            "1 whole egg",
            "1 cup Pecorino Romano cheese, grated",
            "4 cloves garlic, minced",
            "Freshly ground black pepper",
            "Salt for pasta water",
        ],
        "instructions": [
            "Bring a large pot of salted water to boil for pasta.",
            "Whisk together egg yolks, whole egg, and cheese.",
            "Cook pancetta in a large skillet until crispy, about 5-7 minutes.",
            "Add garlic and cook for 1 minute.",
            "Cook spaghetti until al dente, reserving 1 cup pasta water.",
            "Add hot pasta to the skillet with pancetta.",
            "Remove from heat and quickly stir in egg mixture.",
            "Add pasta water gradually until sauce is creamy.",
            "Season generously with black pepper and serve immediately.",
        ],
        "readyInMinutes": 25,
        "servings": 4,
        "calories": 580.0,
        "summary": "An authentic Roman pasta dish with a silky egg-based sauce and crispy pancetta.",
    },
    {
        "id": "8",
        "title": "Herb-Crusted Salmon",
        "ingredients": [
            "4 salmon fillets (6 oz each)",
            "1/2 cup panko breadcrumbs",
            "1/4 cup fresh parsley, chopped",
            "2 tbsp fresh dill, chopped",
            "3 cloves garlic, minced",
            "3 tbsp olive oil",
            "2 tbsp Dijon mustard",
            "1 lemon, zested and juiced",
        ],
        "instructions": [
            "Preheat oven to 400°F (200°C).",
            "Mix breadcrumbs, herbs, garlic, 2 tbsp olive oil, and lemon zest.",
            "Season salmon fillets with salt and pepper.",
            "Brush tops with Dijon mustard and press herb mixture on.",
            "Sear salmon herb-side up in an oven-safe skillet for 3-4 minutes.",
            "Transfer skillet to oven and bake for 8-10 minutes.",
            "Drizzle with lemon juice before serving.",
        ],
        "readyInMinutes": 20,
        "servings": 4,
        "calories": 420.0,
        "summary": "Perfectly cooked salmon with a crispy herb crust and bright lemon flavor.",
    },
    {
        "id": "9",
        "title": "Chicken Tikka Masala",
        "ingredients": [
            "2 lbs boneless chicken thighs, cut into chunks",
            "1 cup plain Greek yogurt",
            "2 tbsp garam masala",
            "1 tbsp ground cumin",
            "4 cloves garlic, minced",
            "1 inch ginger, grated",
            "1 large onion, diced",
            "1 can (28 oz) crushed tomatoes",
            "1 cup heavy cream",
            "2 tbsp vegetable oil",
            "Basmati rice for serving",
        ],
        "instructions": [
            "Marinate chicken in yogurt, half the spices, garlic, and ginger for 30 minutes.",
            "Heat oil in a large skillet and cook marinated chicken until done.",
            "Remove chicken and set aside.",
            "In the same pan, cook onions until golden.",
            "Add remaining spices and crushed tomatoes, simmer for 15 minutes.",
            "Stir in cream and return chicken to the pan.",
            "Simmer for 10 minutes until sauce thickens.",
            "Serve over basmati rice.",
        ],
        "readyInMinutes": 60,
        "servings": 6,
        "calories": 485.0,
        "summary": "Rich and creamy Indian curry with tender chicken in a spiced tomato sauce.",
    },
    {
        "id": "10",
        "title": "Chocolate Chip Cookies",
        "ingredients": [
            "2 1/4 cups all-purpose flour",
            "1 cup butter, softened",
            "3/4 cup granulated sugar",
            "3/4 cup brown sugar, packed",
            "2 large eggs",
            "2 tsp vanilla extract",
            "1 tsp baking soda",
            "1 tsp salt",
            "2 cups chocolate chips",
        ],
        "instructions": [
            "Preheat oven to 375°F (190°C).",
            "Cream together butter and both sugars until light and fluffy.",
            "Beat in eggs one at a time, then vanilla.",
            "Whisk flour, baking soda, and salt, then mix into the wet ingredients.",
            "Stir in chocolate chips.",
            "Drop rounded tablespoons of dough onto baking sheets.",
            "Bake for 9-11 minutes until golden brown.",
        ],
        "readyInMinutes": 25,
        "servings": 36,
        "calories": 140.0,
        "summary": "Classic homemade chocolate chip cookies, crispy on the edges and chewy in the center.",
    },
]

# keyword substring -> catalog ids; fixed mapping, does not scan ingredient lines
KEYWORD_INDEX: List[tuple] = [
    (("chicken",), ("1", "9")),
    (("pasta",), ("2",)),
    (("beef",), ("3",)),
    (("vegetable", "tomato"), ("4",)),
    (("salad", "lettuce"), ("5",)),
    (("flour", "egg", "milk"), ("6",)),
]


class FallbackCatalog:
    """Fixed recipe set served when the provider cannot be reached"""

    def __init__(self, data: Optional[List[Dict]] = None):
        self._data = data if data is not None else CATALOG_DATA

    def all(self) -> List[Recipe]:
        """Every catalog recipe, as fresh copies"""
        return [Recipe.model_validate(entry) for entry in self._data]

    def get(self, recipe_id: str) -> Optional[Recipe]:
        for entry in self._data:
            if entry["id"] == recipe_id:
                return Recipe.model_validate(entry)
        return None

    def filter_by_ingredients(self, keywords: Iterable[str]) -> List[Recipe]:
        """Recipes matched by the keyword mapping, or the whole catalog when nothing matches"""
        matched_ids: List[str] = []
        for keyword in keywords:
            lowered = (keyword or "").lower()
            if not lowered.strip():
                continue
            for triggers, recipe_ids in KEYWORD_INDEX:
                if any(trigger in lowered for trigger in triggers):
                    matched_ids.extend(rid for rid in recipe_ids if rid not in matched_ids)

        recipes = self.all()
        by_id = {recipe.id: recipe for recipe in recipes}
        matched = [by_id[rid] for rid in matched_ids if rid in by_id]
        if not matched:
            logger.debug("No catalog keyword matched, returning full catalog")
            return recipes
        return matched
