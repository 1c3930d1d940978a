from seodex.domain.taxonomy.util.di.provider import TaxonomyProvider

__all__ = ["TaxonomyProvider"]
