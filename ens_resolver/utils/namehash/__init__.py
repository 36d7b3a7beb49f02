from ens_resolver.utils.namehash.namehash import labels_of, namehash  # NOQA
