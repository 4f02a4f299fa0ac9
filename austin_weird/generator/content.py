"""
Generated content record and the static fallback set.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedContent:
    band_name: str
    startup_pitch: str
    taco_recipe: str
    protest_sign: str
    protest_sign_image: str | None = None

    def to_dict(self) -> dict:
        """Wire representation. protestSignImage is left out when absent."""
        data = {
            'bandName': self.band_name,
            'startupPitch': self.startup_pitch,
            'tacoRecipe': self.taco_recipe,
            'protestSign': self.protest_sign,
        }
        if self.protest_sign_image:
            data['protestSignImage'] = self.protest_sign_image
        return data


# Wire key → default used when a live response leaves the field out
FIELD_DEFAULTS = {
    'bandName': 'The Austin Weirdos',
    'startupPitch': "We're building an AI that generates Austin-themed content.",
    'tacoRecipe': 'Breakfast taco with migas and queso.',
    'protestSign': 'Keep Austin Weird!',
}

FALLBACK_SET: tuple[GeneratedContent, ...] = (
    GeneratedContent(
        band_name='The Austin Weirdos',
        startup_pitch="We're building an AI that generates Austin-themed content. Because weird is the new normal.",
        taco_recipe='Breakfast taco with migas, queso, and a side of weirdness. Served with Austin attitude.',
        protest_sign='Keep Austin Weird, Keep Tacos Weirder!',
    ),
    GeneratedContent(
        band_name='The Barton Creek Bats',
        startup_pitch='Revolutionizing the food truck industry with AI-powered taco recommendations. Because Austin knows tacos.',
        taco_recipe='Vegan breakfast taco with tofu scramble, black beans, and homemade salsa verde. Austin-approved!',
        protest_sign='Save Our Food Trucks! 🌮✊',
    ),
    GeneratedContent(
        band_name='The South Congress Stumblers',
        startup_pitch="We're creating a social platform for Austin musicians to collaborate. Because the best bands are born in dive bars.",
        taco_recipe='Brisket taco with pickled onions and chipotle mayo. Smoked for 12 hours because patience is Austin.',
        protest_sign='Keep Austin Live Music Alive! 🎸',
    ),
    GeneratedContent(
        band_name='The Zilker Park Dreamers',
        startup_pitch="Building the ultimate Austin event discovery app. From food trucks to live music, we've got you covered.",
        taco_recipe='Fusion taco with Korean BBQ beef, kimchi slaw, and gochujang sauce. Austin meets Seoul!',
        protest_sign='Protect Our Green Spaces! 🌳',
    ),
    GeneratedContent(
        band_name='The East Side Artists',
        startup_pitch="We're democratizing art with AI-generated murals. Every wall in Austin deserves to be weird.",
        taco_recipe='Breakfast taco with chorizo, eggs, and queso fresco. Served with a side of creativity.',
        protest_sign='Art is Not a Crime! 🎨',
    ),
    GeneratedContent(
        band_name='The Rainey Street Ramblers',
        startup_pitch='Creating the perfect Austin bar crawl app. Because the best stories happen between bars.',
        taco_recipe='Duck confit taco with cherry compote and brie. Fancy tacos for fancy Austinites.',
        protest_sign='Keep Austin Drinking Local! 🍺',
    ),
    GeneratedContent(
        band_name='The UT Campus Crushers',
        startup_pitch="We're building the ultimate student life app for UT Austin. From study spots to late-night eats.",
        taco_recipe="Student budget taco with beans, rice, and whatever's in the fridge. College life, Austin style!",
        protest_sign='Education Not Debt! 📚',
    ),
    GeneratedContent(
        band_name='The Lady Bird Lake Lovers',
        startup_pitch="Revolutionizing outdoor fitness with AI-powered running routes. Austin's trails, reimagined.",
        taco_recipe='Post-workout protein taco with grilled chicken, avocado, and quinoa. Fuel for your Austin adventures.',
        protest_sign='Save Our Trails! 🏃‍♀️',
    ),
)
