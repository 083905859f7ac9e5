from __future__ import annotations

import random

from .errors import WordCatalogTooSmall


WORDS: tuple[str, ...] = (
    "DISEASE",
    "OLD",
    "SNAIL",
    "VACATION",
    "BICYCLE",
    "AIR",
    "GREEN",
    "SANDWICH",
    "VASE",
    "TEACHER",
    "COSTUME",
    "LIGHT",
    "WOLF",
    "YELLOW",
    "SUGAR",
    "RAT",
    "PEN",
    "HELICOPTER",
    "WOOD",
    "BOOK",
    "BUS",
    "FIRE",
    "BLUE",
    "RED",
    "PALM TREE",
    "RUBBER BAND",
    "YOUNG",
    "SMALL",
    "BOX",
    "COUCH",
    "OCTOPUS",
    "SHOVEL",
    "WAR",
    "TREASURE",
    "GOAT",
    "ORANGE",
    "PLANET",
    "CANE",
    "WHEAT",
    "WHITE",
    "ANGER",
    "SNAKE",
    "COLD",
    "MEAN",
    "STRAWBERRY",
    "DESERT",
    "CHILD",
    "SPACESHIP",
    "ARROW",
    "GREY",
    "TRAILER",
    "AIRPLANE",
    "HOUSE",
    "LENTILS",
    "COOK",
    "SOLDIER",
    "BUTTER",
    "AVOCADO",
    "JUNGLE",
    "FOUNTAIN",
    "DUCK",
    "CAMEL",
    "CAT",
    "SPRING",
    "SECURITY",
    "BOAT",
    "DIAMOND",
    "HERO",
    "PAPER",
    "EARTH",
    "JOY",
    "BABY BOTTLE",
    "DAY",
    "HEAVY",
    "BLACK",
    "SALAD",
    "EYE",
    "WATER",
    "HEAD",
    "CHEESE",
    "CASTLE",
    "AIRPORT",
    "MOUNTAIN",
    "BEACH",
    "CAMERA",
    "CAULIFLOWER",
    "TRAIN",
    "TOMATO",
    "WINTER",
    "SCHOOL",
    "SNOW",
    "PEAR",
    "ANKLE",
    "MOUTH",
    "SUMMER",
    "SURPRISE",
    "PRESIDENT",
    "MAP",
    "SOAP",
    "PAINTING",
    "EAR",
    "HORSE",
    "PEAK",
    "DOCTOR",
    "OCEAN",
    "JAIL",
    "TRAVEL",
    "VETERINARIAN",
    "SMART",
    "HISTORY",
    "DISGUST",
    "SUITCASE",
    "QUEEN",
    "FAST",
    "DRAGON",
    "DINOSAUR",
    "UNICORN",
    "PIANO",
    "SLOW",
    "FIREFIGHTER",
    "GUITAR",
    "TOY",
    "ARM",
    "DETECTIVE",
    "ENEMY",
    "KNIGHT",
    "FOOT",
    "HELMET",
    "BROWN",
    "SPIDER",
    "CHICKEN",
    "GLASSES",
    "NURSE",
    "PIRATE",
    "FISH",
    "PIGEON",
    "HONEY",
    "PIG",
    "STONE",
    "CAPE",
    "HAPPINESS",
    "CAKE",
    "MEAL",
    "WEIRD",
    "ICE",
    "DOG",
    "FRENCH FRIES",
    "SADNESS",
    "SHIRT",
    "TALL",
    "MONKEY",
    "FEAR",
    "BALL",
    "MUSHROOM",
    "MOON",
    "MARS",
    "RING",
    "PLATE",
    "SHARK",
    "LAPTOP",
    "CIRCUS",
    "CHOCOLATE",
    "ROBOT",
    "DESSERT",
    "FRIENDS",
    "KING",
    "COW",
    "BAG",
    "LIGHT BULB",
    "WARDROBE",
    "BEAR",
    "MUSTACHE",
    "NIGHT",
    "NATION",
    "MAN",
    "WOMAN",
    "WIND",
    "NICE",
    "HOLE",
    "PARACHUTE",
    "LEG",
    "BANANA",
    "CHEST",
    "HAT",
    "UGLY",
    "TIME",
    "HOT",
    "PRETTY",
    "PINK",
    "RADISH",
    "ZOO",
    "MOTORCYCLE",
    "ROAD",
    "GROUP",
    "LETTER",
    "AUTUMN",
)


def sample_words(count: int, rng: random.Random | None = None, words: tuple[str, ...] = WORDS) -> list[str]:
    if count > len(words):
        raise WordCatalogTooSmall(detail=f"need {count} words, catalog has {len(words)}")
    shuffled = list(words)
    (rng or random).shuffle(shuffled)
    return shuffled[:count]


def pick_axis_words(grid_size: int, rng: random.Random | None = None) -> tuple[list[str], list[str]]:
    """Row and column words for a grid, drawn from one shuffle so they never overlap."""
    picked = sample_words(2 * grid_size, rng)
    return picked[:grid_size], picked[grid_size:]
