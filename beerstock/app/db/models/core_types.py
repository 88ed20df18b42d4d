import enum


class BeerType(str, enum.Enum):
    lager = "LAGER"
    malzbier = "MALZBIER"
    witbier = "WITBIER"
    weiss = "WEISS"
    ale = "ALE"
    ipa = "IPA"
    stout = "STOUT"
