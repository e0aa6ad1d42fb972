"""
Closed catalogs of everything the terrain can place.

Decoration and landmark tags are enums so that every table keyed by them
(pools, renderers, rosters) can be checked for completeness up front.
"""

from __future__ import annotations

from enum import Enum


class ColorMode(Enum):
  """Supported color modes."""

  DARK = "dark"
  LIGHT = "light"


class Hemisphere(Enum):
  """Hemisphere used to align the seasonal cycle."""

  NORTH = "north"
  SOUTH = "south"


class Season(Enum):
  WINTER = "winter"
  SPRING = "spring"
  SUMMER = "summer"
  AUTUMN = "autumn"


class DecorationType(Enum):
  """Every ordinary decoration the selector can place."""

  # Water
  WHALE = "whale"
  FISH = "fish"
  FISH_SCHOOL = "fishSchool"
  BOAT = "boat"
  SEAGULL = "seagull"
  DOCK = "dock"
  WAVES = "waves"
  KELP = "kelp"
  CORAL = "coral"
  JELLYFISH = "jellyfish"
  TURTLE = "turtle"
  BUOY = "buoy"
  SAILBOAT = "sailboat"
  LIGHTHOUSE = "lighthouse"
  CRAB = "crab"
  # Shore and wetland
  ROCK = "rock"
  BOULDER = "boulder"
  FLOWER = "flower"
  BUSH = "bush"
  DRIFTWOOD = "driftwood"
  SANDCASTLE = "sandcastle"
  TIDE_POOLS = "tidePools"
  HERON = "heron"
  SHELLFISH = "shellfish"
  CATTAIL = "cattail"
  FROG = "frog"
  LILY = "lily"
  # Grassland
  PINE = "pine"
  DECIDUOUS = "deciduous"
  MUSHROOM = "mushroom"
  STUMP = "stump"
  DEER = "deer"
  RABBIT = "rabbit"
  FOX = "fox"
  BUTTERFLY = "butterfly"
  BEEHIVE = "beehive"
  WILDFLOWER_PATCH = "wildflowerPatch"
  TALL_GRASS = "tallGrass"
  BIRCH = "birch"
  HAYBALE = "haybale"
  # Forest
  WILLOW = "willow"
  PALM = "palm"
  BIRD = "bird"
  OWL = "owl"
  SQUIRREL = "squirrel"
  MOSS = "moss"
  FERN = "fern"
  DEAD_TREE = "deadTree"
  LOG = "log"
  BERRY_BUSH = "berryBush"
  SPIDER = "spider"
  # Farm
  WHEAT = "wheat"
  FENCE = "fence"
  SCARECROW = "scarecrow"
  BARN = "barn"
  SHEEP = "sheep"
  COW = "cow"
  CHICKEN = "chicken"
  HORSE = "horse"
  RICE_PADDY = "ricePaddy"
  SILO = "silo"
  PIGPEN = "pigpen"
  TROUGH = "trough"
  HAYSTACK = "haystack"
  ORCHARD = "orchard"
  BEE_FARM = "beeFarm"
  PUMPKIN = "pumpkin"
  # Village
  TENT = "tent"
  HUT = "hut"
  HOUSE = "house"
  HOUSE_B = "houseB"
  CHURCH = "church"
  WINDMILL = "windmill"
  WELL = "well"
  TAVERN = "tavern"
  BAKERY = "bakery"
  STABLE = "stable"
  GARDEN = "garden"
  LAUNDRY = "laundry"
  DOGHOUSE = "doghouse"
  SHRINE = "shrine"
  WAGON = "wagon"
  # Town
  MARKET = "market"
  INN = "inn"
  BLACKSMITH = "blacksmith"
  CASTLE = "castle"
  TOWER = "tower"
  BRIDGE = "bridge"
  CATHEDRAL = "cathedral"
  LIBRARY = "library"
  CLOCKTOWER = "clocktower"
  STATUE = "statue"
  PARK = "park"
  WAREHOUSE = "warehouse"
  GATEHOUSE = "gatehouse"
  MANOR = "manor"
  # Biome blend
  REEDS = "reeds"
  FOUNTAIN = "fountain"
  CANAL = "canal"
  WATERMILL = "watermill"
  GARDEN_TREE = "gardenTree"
  POND_LILY = "pondLily"
  # Cross-level props
  CART = "cart"
  BARREL = "barrel"
  TORCH = "torch"
  FLAG = "flag"
  COBBLE_PATH = "cobblePath"
  SMOKE = "smoke"
  SIGNPOST = "signpost"
  LANTERN = "lantern"
  WOODPILE = "woodpile"
  PUDDLE = "puddle"
  CAMPFIRE = "campfire"
  # Winter
  SNOW_PINE = "snowPine"
  SNOW_DECIDUOUS = "snowDeciduous"
  SNOWMAN = "snowman"
  SNOWDRIFT = "snowdrift"
  IGLOO = "igloo"
  FROZEN_POND = "frozenPond"
  ICICLE = "icicle"
  SLED = "sled"
  SNOW_COVERED_ROCK = "snowCoveredRock"
  BARE_BUSH = "bareBush"
  WINTER_BIRD = "winterBird"
  FIREWOOD = "firewood"
  # Spring
  CHERRY_BLOSSOM = "cherryBlossom"
  CHERRY_BLOSSOM_SMALL = "cherryBlossomSmall"
  CHERRY_PETALS = "cherryPetals"
  TULIP = "tulip"
  TULIP_FIELD = "tulipField"
  SPROUT = "sprout"
  NEST = "nest"
  LAMB = "lamb"
  CROCUS = "crocus"
  RAIN_PUDDLE = "rainPuddle"
  BIRDHOUSE = "birdhouse"
  GARDEN_BED = "gardenBed"
  # Summer
  PARASOL = "parasol"
  BEACH_TOWEL = "beachTowel"
  SANDCASTLE_SUMMER = "sandcastleSummer"
  SURFBOARD = "surfboard"
  ICE_CREAM_CART = "iceCreamCart"
  HAMMOCK = "hammock"
  SUNFLOWER = "sunflower"
  WATERMELON = "watermelon"
  SPRINKLER = "sprinkler"
  LEMONADE = "lemonade"
  FIREFLIES = "fireflies"
  SWIMMING_POOL = "swimmingPool"
  # Autumn
  AUTUMN_MAPLE = "autumnMaple"
  AUTUMN_OAK = "autumnOak"
  AUTUMN_BIRCH = "autumnBirch"
  AUTUMN_GINKGO = "autumnGinkgo"
  FALLEN_LEAVES = "fallenLeaves"
  LEAF_SWIRL = "leafSwirl"
  ACORN = "acorn"
  CORN_STALK = "cornStalk"
  SCARECROW_AUTUMN = "scarecrowAutumn"
  HARVEST_BASKET = "harvestBasket"
  HOT_DRINK = "hotDrink"
  AUTUMN_WREATH = "autumnWreath"


# Decorations whose drawing carries inline motion-script animation
SMIL_ANIMATED: frozenset[DecorationType] = frozenset({
  DecorationType.SEAGULL,
  DecorationType.WAVES,
  DecorationType.BIRD,
  DecorationType.WINDMILL,
  DecorationType.SMOKE,
  DecorationType.FOUNTAIN,
  DecorationType.WATERMILL,
  DecorationType.JELLYFISH,
  DecorationType.TURTLE,
  DecorationType.BUTTERFLY,
  DecorationType.BAKERY,
  DecorationType.CLOCKTOWER,
  DecorationType.CAMPFIRE,
})

# Decorations animated through style-sheet classes
CSS_ANIMATED: frozenset[DecorationType] = frozenset({
  DecorationType.CATTAIL,
  DecorationType.TALL_GRASS,
  DecorationType.LAUNDRY,
})


class LandmarkTier(Enum):
  """Rarity tiers, declared lowest first."""

  RARE = "rare"
  EPIC = "epic"
  LEGENDARY = "legendary"


class LandmarkType(Enum):
  # Rare
  PYRAMID = "pyramid"
  COLOSSEUM = "colosseum"
  PARTHENON = "parthenon"
  SPHINX = "sphinx"
  PAGODA = "pagoda"
  TORII = "torii"
  GREAT_WALL = "greatWall"
  TEMPLE_OF_HEAVEN = "templeOfHeaven"
  EIFFEL_TOWER = "eiffelTower"
  BIG_BEN = "bigBen"
  WINDMILL_GRAND = "windmillGrand"
  OBSERVATORY = "observatory"
  VOLCANO = "volcano"
  GIANT_MUSHROOM = "giantMushroom"
  # Epic
  FORBIDDEN_CITY = "forbiddenCity"
  TAJ_MAHAL = "tajMahal"
  NOTRE_DAME = "notreDame"
  ST_BASILS = "stBasils"
  COLOSSUS_LIGHTHOUSE = "colossusLighthouse"
  OPERA_HOUSE = "operaHouse"
  SKYSCRAPER = "skyscraper"
  ENCHANTED_FORGE = "enchantedForge"
  ANCIENT_RUINS = "ancientRuins"
  BONSAI_GIANT = "bonsaiGiant"
  # Legendary
  FLOATING_ISLAND = "floatingIsland"
  CRYSTAL_SPIRE = "crystalSpire"
  DRAGON_NEST = "dragonNest"
  WORLD_TREE = "worldTree"
  SKY_TEMPLE = "skyTemple"
  ANCIENT_PORTAL = "ancientPortal"


LANDMARK_ROSTERS: dict[LandmarkTier, tuple[LandmarkType, ...]] = {
  LandmarkTier.RARE: (
    LandmarkType.PYRAMID,
    LandmarkType.COLOSSEUM,
    LandmarkType.PARTHENON,
    LandmarkType.SPHINX,
    LandmarkType.PAGODA,
    LandmarkType.TORII,
    LandmarkType.GREAT_WALL,
    LandmarkType.TEMPLE_OF_HEAVEN,
    LandmarkType.EIFFEL_TOWER,
    LandmarkType.BIG_BEN,
    LandmarkType.WINDMILL_GRAND,
    LandmarkType.OBSERVATORY,
    LandmarkType.VOLCANO,
    LandmarkType.GIANT_MUSHROOM,
  ),
  LandmarkTier.EPIC: (
    LandmarkType.FORBIDDEN_CITY,
    LandmarkType.TAJ_MAHAL,
    LandmarkType.NOTRE_DAME,
    LandmarkType.ST_BASILS,
    LandmarkType.COLOSSUS_LIGHTHOUSE,
    LandmarkType.OPERA_HOUSE,
    LandmarkType.SKYSCRAPER,
    LandmarkType.ENCHANTED_FORGE,
    LandmarkType.ANCIENT_RUINS,
    LandmarkType.BONSAI_GIANT,
  ),
  LandmarkTier.LEGENDARY: (
    LandmarkType.FLOATING_ISLAND,
    LandmarkType.CRYSTAL_SPIRE,
    LandmarkType.DRAGON_NEST,
    LandmarkType.WORLD_TREE,
    LandmarkType.SKY_TEMPLE,
    LandmarkType.ANCIENT_PORTAL,
  ),
}


def _check_rosters() -> None:
  listed = [t for roster in LANDMARK_ROSTERS.values() for t in roster]
  if len(listed) != len(set(listed)) or set(listed) != set(LandmarkType):
    raise RuntimeError("Every landmark type must appear in exactly one tier roster")


_check_rosters()
