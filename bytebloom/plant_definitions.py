"""The catalogue of plant species, each generated from a fixed seed."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from .plant import LifeCycleStage, Plant, PlantGenetics


def _uniform(rng: random.Random, low: float, high: float) -> float:
    """A float drawn from the half-open range [low, high)."""
    return low + (high - low) * rng.random()


@dataclass(frozen=True)
class PlantDefinition:
    """A species name and the seed its traits are generated from."""

    name: str
    seed: int

    def build(self) -> Plant:
        """Generate the species template; the same seed gives the same traits."""
        rng = random.Random(self.seed)
        genetics = PlantGenetics(
            growth_time=rng.randrange(5, 15),
            yield_range=(rng.randrange(1, 5), rng.randrange(5, 10)),
            ideal_moisture_range=(_uniform(rng, 0.3, 0.5), _uniform(rng, 0.5, 0.7)),
            nutrient_consumption=(
                _uniform(rng, 0.05, 0.15),
                _uniform(rng, 0.05, 0.15),
                _uniform(rng, 0.05, 0.15),
            ),
            light_req=_uniform(rng, 4.0, 6.0),
            pest_resistance=_uniform(rng, 0.05, 0.15),
            disease_resistance=_uniform(rng, 0.05, 0.15),
            genetic_stability=_uniform(rng, 0.85, 0.95),
        )
        return Plant(
            species=self.name,
            genetics=genetics,
            life_cycle_stage=LifeCycleStage.SEED,
            maturity_age=rng.randrange(8, 12),
            wither_time=rng.randrange(13, 18),
        )


_CATALOGUE = (
    ("Crimson Bloom", 12345), ("Azure Fern", 54321), ("Golden Pine", 98765),
    ("Shadow Root", 13579), ("Silver Birch", 24680), ("Whispering Willow", 11223),
    ("Sunpetal", 33445), ("Moonpetal", 55667), ("Starflower", 77889),
    ("Dragon's Breath", 99001), ("Ghost Orchid", 10111), ("Glimmering Moss", 21212),
    ("Ruby Thorn", 32323), ("Sapphire Vine", 43434), ("Emerald Ivy", 54545),
    ("Obsidian Rose", 65656), ("Opal Cactus", 76767), ("Jade Bamboo", 87878),
    ("Topaz Tulip", 98989), ("Amethyst Lily", 10101), ("Garnet Poppy", 20202),
    ("Diamond Daisy", 30303), ("Pearl Blossom", 40404), ("Coral Bell", 50505),
    ("Quartz Crystal", 60606), ("Turquoise Iris", 70707), ("Lapis Lazuli Lupin", 80808),
    ("Malachite Marigold", 90909), ("Sunstone Sunflower", 11111),
    ("Moonstone Morning Glory", 22222), ("Bloodstone Bellflower", 33333),
    ("Tiger's Eye Thistle", 44444), ("Hawk's Eye Heather", 55555),
    ("Cat's Eye Clover", 66666), ("Serpentine Snapdragon", 77777), ("Agate Aloe", 88888),
    ("Jasper Jasmine", 99999), ("Onyx Orchid", 10000), ("Carnelian Crocus", 20000),
    ("Sodalite Snowdrop", 30000), ("Rhodonite Rhododendron", 40000),
    ("Kyanite Kohlrabi", 50000), ("Fluorite Foxglove", 60000),
    ("Aventurine Anemone", 70000), ("Amazonite Aster", 80000),
    ("Labradorite Lavender", 90000), ("Peridot Petunia", 12121), ("Spinel Zinnia", 23232),
    ("Zircon Geranium", 34343), ("Tanzanite Dahlia", 45454), ("Alexandrite Azalea", 56565),
    ("Morganite Magnolia", 67676), ("Heliodor Hibiscus", 78787),
    ("Aquamarine Buttercup", 89898), ("Goshenite Gladiolus", 10112),
    ("Bixbite Begonia", 21223), ("Fire Opal Freesia", 32334),
    ("Black Opal Oleander", 43445), ("Boulder Opal Bluebell", 54556),
    ("Matrix Opal Monkshood", 65667), ("Andamooka Opal Aconite", 76778),
    ("Lightning Ridge Opal Larkspur", 87889), ("Welsh Opal Wolfsbane", 98990),
    ("Honduran Opal Hollyhock", 10102), ("Peruvian Opal Peony", 20203),
    ("Ethiopian Opal Elderflower", 30304), ("Mexican Fire Opal Mimosa", 40405),
    ("Brazilian Opal Bougainvillea", 50506), ("Slovakian Opal Sweet Pea", 60607),
    ("Tanzanian Opal Tansy", 70708), ("Indonesian Opal Impatiens", 80809),
    ("Australian Opal Allium", 90910), ("Dragon's Eye", 11112), ("Phoenix Feather", 22223),
    ("Griffin's Claw", 33334), ("Unicorn's Horn", 44445), ("Mermaid's Scale", 55556),
    ("Fairy's Wing", 66667), ("Pixie Dust", 77778), ("Goblin's Gold", 88889),
    ("Troll's Treasure", 99990), ("Dwarf's Delight", 10001), ("Elf's Elegance", 20002),
    ("Giant's Growth", 30003), ("Nymph's Nectar", 40004), ("Satyr's Song", 50005),
    ("Centaur's Courage", 60006), ("Minotaur's Maze", 70007), ("Hydra's Head", 80008),
    ("Siren's Call", 90009), ("Harpy's Feather", 12321), ("Chimera's Charm", 23432),
    ("Kraken's Ink", 34543), ("Leviathan's Lullaby", 45654),
    ("Behemoth's Blessing", 56765), ("Ziz's Zephyr", 67876), ("Roc's Roar", 78987),
    ("Thunderbird's Cry", 89098), ("Quetzalcoatl's Crest", 90109),
    ("Fenrir's Fang", 10210), ("Jormungandr's Coil", 21321),
    ("Sleipnir's Stride", 32432), ("Huginn's Thought", 43543),
    ("Muninn's Memory", 54654), ("Gungnir's Point", 65765), ("Mjolnir's Might", 76876),
    ("Bifrost's Bridge", 87987), ("Yggdrasil's Root", 98098), ("Asgard's Pride", 10113),
    ("Midgard's Serpent", 21224), ("Jotunheim's Jotun", 32335),
    ("Vanaheim's Vanir", 43446), ("Alfheim's Elf", 54557),
    ("Svartalfheim's Dwarf", 65668), ("Muspelheim's Fire", 76779),
    ("Niflheim's Ice", 87880), ("Hel's Hand", 98991), ("Ragnarok's Ruin", 10103),
    ("Valhalla's Valor", 20204), ("Einherjar's Echo", 30305),
    ("Valkyrie's Voice", 40406), ("Norn's Thread", 50507), ("Fates' Decree", 60608),
    ("Chaos's Bloom", 70709), ("Order's Orchid", 80810), ("Light's Lily", 90911),
    ("Dark's Daisy", 11113), ("Sun's Sunflower", 22224),
    ("Moon's Morning Glory", 33335), ("Star's Snapdragon", 44446),
    ("Sky's Snowdrop", 55557), ("Earth's Elderflower", 66668),
    ("Sea's Sweet Pea", 77779), ("Fire's Foxglove", 88880), ("Wind's Wolfsbane", 99991),
    ("Storm's Snapdragon", 10002), ("Ice's Iris", 20003), ("Stone's Snapdragon", 30004),
    ("Wood's Wolfsbane", 40005), ("Metal's Marigold", 50006), ("Void's Violet", 60007),
    ("Aether's Azalea", 70008), ("Nether's Nettle", 80009), ("Dream's Dahlia", 90010),
    ("Nightmare's Nightshade", 12322), ("Memory's Mimosa", 23433),
    ("Thought's Thistle", 34544), ("Emotion's Elderflower", 45655),
    ("Soul's Sunflower", 56766), ("Spirit's Snapdragon", 67877),
    ("Heart's Hollyhock", 78988), ("Mind's Monkshood", 89099),
    ("Body's Bluebell", 90110), ("Life's Lily", 10211), ("Death's Daisy", 21322),
    ("Time's Thyme", 32433), ("Space's Snapdragon", 43544),
    ("Gravity's Gladiolus", 54655), ("Energy's Elderflower", 65766),
    ("Matter's Marigold", 76877), ("Antimatter's Anemone", 87988),
    ("Quantum's Quince", 98099), ("Singularity's Snapdragon", 10114),
    ("Event Horizon's Elderflower", 21225), ("Nebula's Nettle", 32336),
    ("Galaxy's Gladiolus", 43447), ("Universe's Uva-ursi", 54558),
    ("Multiverse's Monkshood", 65669), ("Dimension's Dahlia", 76780),
    ("Reality's Rhododendron", 87881), ("Illusion's Iris", 98992),
    ("Truth's Tulip", 10104), ("Lie's Lily", 20205), ("Hope's Hollyhock", 30306),
    ("Despair's Daisy", 40407), ("Joy's Jasmine", 50508),
    ("Sorrow's Snapdragon", 60609), ("Love's Lavender", 70710),
    ("Hate's Heather", 80811), ("Peace's Peony", 90912), ("War's Wolfsbane", 11114),
    ("Wisdom's Wisteria", 22225), ("Folly's Foxglove", 33336),
    ("Knowledge's Kohlrabi", 44447), ("Ignorance's Iris", 55558),
    ("Power's Poppy", 66669), ("Weakness's Wisteria", 77780),
    ("Courage's Crocus", 88881), ("Fear's Foxglove", 99992), ("Virtue's Violet", 10003),
    ("Sin's Snapdragon", 20004), ("Faith's Freesia", 30005), ("Doubt's Dahlia", 40006),
    ("Destiny's Daisy", 50007), ("Freedom's Foxglove", 60008),
)

DEFINITIONS: tuple[PlantDefinition, ...] = tuple(
    PlantDefinition(name, seed) for name, seed in _CATALOGUE
)

PLANTS: tuple[Plant, ...] = tuple(definition.build() for definition in DEFINITIONS)

_BY_SPECIES: dict[str, Plant] = {}
for _plant in PLANTS:
    _BY_SPECIES.setdefault(_plant.species, _plant)
del _plant


def find_plant(species: str) -> Optional[Plant]:
    """The first catalogue template with this species name, or None."""
    return _BY_SPECIES.get(species)