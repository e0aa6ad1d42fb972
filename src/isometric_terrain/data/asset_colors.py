"""Per-mode color tables for terrain decorations and landmarks"""
from types import MappingProxyType
from typing import Dict, Mapping

# Dark mode asset colors
DARK_ASSETS: Dict[str, str] = {
    'trunk': '#6b4226',
    'pine': '#2a6e1e',
    'leaf': '#3d8c2a',
    'bush': '#357a22',
    'roof_a': '#c45435',
    'roof_b': '#d4924a',
    'wall': '#d4c8a0',
    'wall_shade': '#b0a078',
    'church': '#e0d8c0',
    'fence': '#9e8a60',
    'wheat': '#d4b840',
    'sheep': '#e8e8e0',
    'sheep_head': '#333',
    'cow': '#8b5e3c',
    'cow_spot': '#f5f0e0',
    'chicken': '#d4a030',
    'whale': '#4a7a9e',
    'whale_belly': '#8ab4c8',
    'boat': '#8b6840',
    'sail': '#e8e0d0',
    'fish': '#70b0c8',
    'flag': '#cc3333',
    'windmill': '#c8b888',
    'wind_blade': '#d8d0b8',
    'well': '#7a6a4a',
    'chimney': '#8a6a4a',
    'path': '#a09068',
    'water': '#3a6a9e',
    'water_light': '#5a90be',
    'deer': '#8a6030',
    'horse': '#6e4422',
    'flower': '#e06080',
    'flower_center': '#f0d040',
    'mushroom': '#e8dcc8',
    'mushroom_cap': '#c44030',
    'rock': '#808080',
    'boulder': '#6a6a6a',
    'palm': '#4a8828',
    'willow': '#558838',
    'seagull': '#e0e0e0',
    'dock': '#7a6040',
    'tent': '#c8b888',
    'tent_stripe': '#cc4444',
    'hut': '#a08860',
    'market': '#d8c898',
    'market_awning': '#cc5533',
    'inn': '#c8a878',
    'inn_sign': '#d4a040',
    'blacksmith': '#555555',
    'anvil': '#444444',
    'castle': '#a0a0a0',
    'castle_roof': '#606080',
    'tower': '#909090',
    'bridge': '#8a7a5a',
    'cart': '#8a6a40',
    'barrel': '#7a5a30',
    'torch': '#6a5030',
    'torch_flame': '#ff9922',
    'cobble': '#888878',
    'smoke': 'rgba(180,180,180,0.4)',
    'bird': '#444444',
    'scarecrow': '#8a7040',
    'scarecrow_hat': '#5a4020',
    'stump': '#6b4a26',
    'river_overlay': 'rgba(35,85,160,0.60)',
    'pond_overlay': 'rgba(25,75,150,0.65)',
    'reeds': '#6a8838',
    'fountain': '#909090',
    'fountain_water': '#70a8d0',
    'canal': '#7a7a6a',
    'garden_tree': '#4a9a3a',
    'rice_paddy': '#8aaa48',
    'rice_paddy_water': '#4a88b0',
    'jellyfish': '#9a70c0',
    'coral': '#d06858',
    'turtle': '#5a8848',
    'buoy': '#cc4444',
    'lighthouse': '#d8d0b8',
    'crab': '#c06030',
    'driftwood': '#8a7050',
    'sandcastle': '#d8c890',
    'tide_pools': '#5a90b0',
    'heron': '#a0a8b0',
    'shellfish': '#c0a880',
    'cattail': '#6a8838',
    'frog': '#4a8830',
    'lily': '#e088a0',
    'rabbit': '#b0a090',
    'fox': '#c06a28',
    'butterfly': '#d070a0',
    'butterfly_wing': '#e0a040',
    'beehive': '#c0a040',
    'wildflower': '#d060d0',
    'tall_grass': '#5a9838',
    'birch_bark': '#e0d8c8',
    'haybale': '#c0a848',
    'owl': '#8a7050',
    'squirrel': '#a06030',
    'moss': '#4a7a30',
    'fern': '#3a8828',
    'dead_tree': '#6a5a40',
    'log': '#7a5a30',
    'berry_bush': '#3a7828',
    'berry': '#cc3030',
    'spider_web': 'rgba(200,200,200,0.5)',
    'silo': '#a0a0a0',
    'pig': '#e0a8a0',
    'trough': '#7a6a50',
    'haystack': '#c8a838',
    'orchard': '#4a8828',
    'orchard_fruit': '#cc4430',
    'bee_farm': '#c8b060',
    'pumpkin': '#d07020',
    'tavern': '#a08860',
    'tavern_sign': '#8a6830',
    'bakery': '#c8a878',
    'stable': '#8a7050',
    'garden_fence': '#e0d8c0',
    'laundry': '#e0d8e8',
    'doghouse': '#8a6030',
    'shrine': '#a0a0a8',
    'wagon': '#8a6840',
    'cathedral': '#c0b8a8',
    'cathedral_window': '#4080c0',
    'library': '#b0a088',
    'clocktower': '#a0a0a0',
    'clock_face': '#e8e0c8',
    'statue': '#909098',
    'park_bench': '#6a5a40',
    'warehouse': '#8a8078',
    'gatehouse': '#a09888',
    'manor': '#c8b898',
    'manor_garden': '#4a8838',
    'signpost': '#7a6040',
    'lantern': '#6a5a40',
    'lantern_glow': '#ffc840',
    'woodpile': '#7a5a30',
    'puddle': '#5a88b8',
    'campfire': '#6a5030',
    'campfire_flame': '#ff6622',
    'snow_cap': '#e8eef5',
    'snow_ground': '#d8e2ee',
    'ice': '#a0c0e0',
    'icicle': '#b0d4f0',
    'frozen_water': '#6090b8',
    'igloo': '#dce8f2',
    'sled_wood': '#8a5a30',
    'sled_runner': '#607080',
    'scarf_red': '#cc3030',
    'snowman_coal': '#2a2a2a',
    'snowman_carrot': '#e07020',
    'winter_bird_red': '#cc3030',
    'winter_bird_brown': '#8a6040',
    'firewood_log': '#6a4020',
    'bare_branch': '#6a5a4a',
    'frost_white': '#e0e8f0',
    'cherry_petal_pink': '#f5a0b8',
    'cherry_petal_white': '#f8e0e8',
    'cherry_trunk': '#6a4030',
    'cherry_branch': '#7a5040',
    'tulip_red': '#e04050',
    'tulip_yellow': '#f0d040',
    'tulip_purple': '#9050c0',
    'tulip_stem': '#5a9a40',
    'sprout_green': '#80d050',
    'nest_brown': '#7a5530',
    'egg_blue': '#a8d8e8',
    'egg_white': '#f0ece0',
    'crocus_purple': '#8040b0',
    'crocus_yellow': '#e8c830',
    'lamb_wool': '#f0ece5',
    'birdhouse_wood': '#a07040',
    'garden_soil': '#5a4030',
    'parasol_red': '#e04040',
    'parasol_blue': '#4080d0',
    'parasol_yellow': '#e8c820',
    'parasol_stripe': '#ffffff',
    'beach_towel_a': '#e05050',
    'beach_towel_b': '#4090d0',
    'sandcastle_wall': '#d8c090',
    'surfboard_body': '#e0e0e0',
    'surfboard_stripe': '#e04040',
    'ice_cream_cart': '#f0e8d0',
    'ice_cream_umbrella': '#e04040',
    'hammock_fabric': '#d09050',
    'sunflower_petal': '#f0c820',
    'sunflower_center': '#5a3a20',
    'watermelon_rind': '#40a040',
    'watermelon_flesh': '#e04040',
    'watermelon_seed': '#2a2a2a',
    'lemonade_stand': '#f0d880',
    'sprinkler_metal': '#8090a0',
    'pool_water': '#60b8e0',
    'pool_edge': '#c0c8d0',
    'maple_red': '#c83020',
    'maple_crimson': '#a02020',
    'maple_orange': '#d07020',
    'oak_gold': '#c8a030',
    'oak_brown': '#8a6030',
    'birch_yellow': '#d8c040',
    'ginkgo_yellow': '#d8c830',
    'fallen_leaf_red': '#c04030',
    'fallen_leaf_orange': '#d08030',
    'fallen_leaf_gold': '#d0a030',
    'fallen_leaf_brown': '#8a5a30',
    'acorn_body': '#8a6030',
    'acorn_cap': '#5a3820',
    'corn_stalk_color': '#c8a860',
    'corn_ear': '#d8c060',
    'harvest_apple': '#c83030',
    'harvest_grape': '#6030a0',
    'hot_drink_mug': '#c8a060',
    'hot_drink_steam': '#d0d8e0',
    'wreath_green': '#507038',
    'wreath_berry': '#c03030',
    # Landmarks
    'epic_gold': '#d4a830',
    'epic_marble': '#e0dccf',
    'epic_jade': '#3a9a70',
    'epic_crystal': '#80d0e8',
    'epic_magic': '#a060d0',
    'epic_portal': '#40e0d0',
}

# Light mode asset colors
LIGHT_ASSETS: Dict[str, str] = {
    'trunk': '#7a5030',
    'pine': '#358025',
    'leaf': '#4a9e35',
    'bush': '#40882a',
    'roof_a': '#d05a3a',
    'roof_b': '#daa055',
    'wall': '#f0e8d0',
    'wall_shade': '#d0c498',
    'church': '#f0e8d8',
    'fence': '#b09a68',
    'wheat': '#dac040',
    'sheep': '#f5f5f0',
    'sheep_head': '#444',
    'cow': '#9a6e45',
    'cow_spot': '#fff',
    'chicken': '#daa835',
    'whale': '#4580aa',
    'whale_belly': '#90bcd0',
    'boat': '#9a7848',
    'sail': '#fff',
    'fish': '#60a0b8',
    'flag': '#dd3838',
    'windmill': '#d8c898',
    'wind_blade': '#eee',
    'well': '#8a7a55',
    'chimney': '#9a7a55',
    'path': '#b8a078',
    'water': '#4578aa',
    'water_light': '#65a0cc',
    'deer': '#9a7038',
    'horse': '#7e5430',
    'flower': '#f07090',
    'flower_center': '#ffe050',
    'mushroom': '#f0e8d8',
    'mushroom_cap': '#d05040',
    'rock': '#909090',
    'boulder': '#7a7a7a',
    'palm': '#55a030',
    'willow': '#609840',
    'seagull': '#f0f0f0',
    'dock': '#8a7050',
    'tent': '#d8c898',
    'tent_stripe': '#dd5555',
    'hut': '#b09870',
    'market': '#e8d8a8',
    'market_awning': '#dd6644',
    'inn': '#d8b888',
    'inn_sign': '#e4b050',
    'blacksmith': '#666666',
    'anvil': '#555555',
    'castle': '#b0b0b0',
    'castle_roof': '#707090',
    'tower': '#a0a0a0',
    'bridge': '#9a8a6a',
    'cart': '#9a7a50',
    'barrel': '#8a6a38',
    'torch': '#7a6038',
    'torch_flame': '#ffaa33',
    'cobble': '#989888',
    'smoke': 'rgba(160,160,160,0.35)',
    'bird': '#555555',
    'scarecrow': '#9a8050',
    'scarecrow_hat': '#6a5030',
    'stump': '#7a5a30',
    'river_overlay': 'rgba(60,130,210,0.55)',
    'pond_overlay': 'rgba(50,120,200,0.60)',
    'reeds': '#7a9848',
    'fountain': '#a0a0a0',
    'fountain_water': '#80b8e0',
    'canal': '#8a8a7a',
    'garden_tree': '#55aa45',
    'rice_paddy': '#9aba58',
    'rice_paddy_water': '#5a98c0',
    'jellyfish': '#b080d8',
    'coral': '#e07868',
    'turtle': '#6a9858',
    'buoy': '#dd5555',
    'lighthouse': '#f0e8d8',
    'crab': '#d07040',
    'driftwood': '#9a8060',
    'sandcastle': '#e8d8a0',
    'tide_pools': '#6aa0c0',
    'heron': '#b0b8c0',
    'shellfish': '#d0b890',
    'cattail': '#7a9848',
    'frog': '#5a9838',
    'lily': '#f098b0',
    'rabbit': '#c0b0a0',
    'fox': '#d07a38',
    'butterfly': '#e080b0',
    'butterfly_wing': '#f0b050',
    'beehive': '#d0b050',
    'wildflower': '#e070e0',
    'tall_grass': '#6aa848',
    'birch_bark': '#f0e8d8',
    'haybale': '#d0b858',
    'owl': '#9a8060',
    'squirrel': '#b07040',
    'moss': '#5a8a38',
    'fern': '#4a9838',
    'dead_tree': '#7a6a50',
    'log': '#8a6a40',
    'berry_bush': '#4a8838',
    'berry': '#dd4040',
    'spider_web': 'rgba(180,180,180,0.45)',
    'silo': '#b0b0b0',
    'pig': '#f0b8b0',
    'trough': '#8a7a60',
    'haystack': '#d8b848',
    'orchard': '#55a038',
    'orchard_fruit': '#dd5540',
    'bee_farm': '#d8c070',
    'pumpkin': '#e08030',
    'tavern': '#b09870',
    'tavern_sign': '#9a7838',
    'bakery': '#d8b888',
    'stable': '#9a8060',
    'garden_fence': '#f0e8d0',
    'laundry': '#f0e8f0',
    'doghouse': '#9a7040',
    'shrine': '#b0b0b8',
    'wagon': '#9a7850',
    'cathedral': '#d0c8b8',
    'cathedral_window': '#5090d0',
    'library': '#c0b098',
    'clocktower': '#b0b0b0',
    'clock_face': '#f8f0d8',
    'statue': '#a0a0a8',
    'park_bench': '#7a6a50',
    'warehouse': '#9a9088',
    'gatehouse': '#b0a898',
    'manor': '#d8c8a8',
    'manor_garden': '#55a048',
    'signpost': '#8a7050',
    'lantern': '#7a6a50',
    'lantern_glow': '#ffd850',
    'woodpile': '#8a6a40',
    'puddle': '#6a98c8',
    'campfire': '#7a6038',
    'campfire_flame': '#ff7733',
    'snow_cap': '#f0f4f8',
    'snow_ground': '#e4ecf4',
    'ice': '#b0d0e8',
    'icicle': '#c0e0f8',
    'frozen_water': '#70a0c8',
    'igloo': '#e8f0f8',
    'sled_wood': '#9a6a38',
    'sled_runner': '#708090',
    'scarf_red': '#dd4040',
    'snowman_coal': '#333333',
    'snowman_carrot': '#f08030',
    'winter_bird_red': '#dd4040',
    'winter_bird_brown': '#9a7050',
    'firewood_log': '#7a5030',
    'bare_branch': '#7a6a5a',
    'frost_white': '#eef4f8',
    'cherry_petal_pink': '#f8b0c8',
    'cherry_petal_white': '#fce8f0',
    'cherry_trunk': '#7a5040',
    'cherry_branch': '#8a6050',
    'tulip_red': '#f05060',
    'tulip_yellow': '#f8e050',
    'tulip_purple': '#a060d0',
    'tulip_stem': '#6aaa50',
    'sprout_green': '#90e060',
    'nest_brown': '#8a6540',
    'egg_blue': '#b8e8f0',
    'egg_white': '#f8f4e8',
    'crocus_purple': '#9050c0',
    'crocus_yellow': '#f0d838',
    'lamb_wool': '#f8f4ed',
    'birdhouse_wood': '#b08050',
    'garden_soil': '#6a5040',
    'parasol_red': '#f05050',
    'parasol_blue': '#5090e0',
    'parasol_yellow': '#f0d030',
    'parasol_stripe': '#ffffff',
    'beach_towel_a': '#f06060',
    'beach_towel_b': '#50a0e0',
    'sandcastle_wall': '#e8d0a0',
    'surfboard_body': '#f0f0f0',
    'surfboard_stripe': '#f05050',
    'ice_cream_cart': '#f8f0e0',
    'ice_cream_umbrella': '#f05050',
    'hammock_fabric': '#e0a060',
    'sunflower_petal': '#f8d030',
    'sunflower_center': '#6a4a30',
    'watermelon_rind': '#50b050',
    'watermelon_flesh': '#f05050',
    'watermelon_seed': '#333333',
    'lemonade_stand': '#f8e890',
    'sprinkler_metal': '#90a0b0',
    'pool_water': '#70c8f0',
    'pool_edge': '#d0d8e0',
    'maple_red': '#d84030',
    'maple_crimson': '#b03030',
    'maple_orange': '#e08030',
    'oak_gold': '#d8b040',
    'oak_brown': '#9a7040',
    'birch_yellow': '#e8d050',
    'ginkgo_yellow': '#e8d840',
    'fallen_leaf_red': '#d05040',
    'fallen_leaf_orange': '#e09040',
    'fallen_leaf_gold': '#e0b040',
    'fallen_leaf_brown': '#9a6a40',
    'acorn_body': '#9a7040',
    'acorn_cap': '#6a4830',
    'corn_stalk_color': '#d8b870',
    'corn_ear': '#e8d070',
    'harvest_apple': '#d84040',
    'harvest_grape': '#7040b0',
    'hot_drink_mug': '#d8b070',
    'hot_drink_steam': '#e0e8f0',
    'wreath_green': '#608048',
    'wreath_berry': '#d04040',
    # Landmarks
    'epic_gold': '#e0b840',
    'epic_marble': '#f0ece0',
    'epic_jade': '#45aa80',
    'epic_crystal': '#90dcf0',
    'epic_magic': '#b070e0',
    'epic_portal': '#50e8d8',
}


def get_asset_colors(mode: str) -> Mapping[str, str]:
    """Read-only asset color table for a color mode ('dark' or 'light')"""
    if mode == 'dark':
        return MappingProxyType(DARK_ASSETS)
    if mode == 'light':
        return MappingProxyType(LIGHT_ASSETS)
    raise ValueError(f"Unknown color mode: {mode!r}")


if set(DARK_ASSETS) != set(LIGHT_ASSETS):
    raise RuntimeError("Dark and light asset tables must define the same keys")
