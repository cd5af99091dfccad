"""
Cat Breeder - Core Module
Random source, genetics, and trait collection.
"""

from .random_source import (
    RandomFn,
    create_seeded_random,
    default_random,
    pick_random,
    coin_flip,
    random_int,
    normal_random,
)
from .genetics import (
    TraitSpec,
    TRAITS,
    Genotype,
    Phenotype,
    Cat,
    phenotype_of_trait,
    full_phenotype,
    breed_allele_pair,
    breed,
    random_genotype,
    random_cat,
    random_cat_name,
    generate_cat_id,
)
from .collection import (
    CollectedTrait,
    TraitCollection,
    phenotype_key,
    all_phenotype_combinations,
    register_bred_cat,
    collection_progress,
)

__all__ = [
    # Random
    "RandomFn",
    "create_seeded_random",
    "default_random",
    "pick_random",
    "coin_flip",
    "random_int",
    "normal_random",

    # Genetics
    "TraitSpec",
    "TRAITS",
    "Genotype",
    "Phenotype",
    "Cat",
    "phenotype_of_trait",
    "full_phenotype",
    "breed_allele_pair",
    "breed",
    "random_genotype",
    "random_cat",
    "random_cat_name",
    "generate_cat_id",

    # Collection
    "CollectedTrait",
    "TraitCollection",
    "phenotype_key",
    "all_phenotype_combinations",
    "register_bred_cat",
    "collection_progress",
]
