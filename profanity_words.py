"""Bilingual (English/French) profanity lexicon used by the review filter."""
from functools import lru_cache
from typing import Iterable, Iterator, FrozenSet

# ==================== WORD LISTS ====================
# Lowercase tokens and a few multi-word phrases. Accented French entries are
# kept as written; the normalizer strips accents from incoming text instead.

ENGLISH_PROFANITY: FrozenSet[str] = frozenset({
    # F-word variations
    "fuck", "fucking", "fucked", "fucker", "fucks", "fuckface", "fuckhead",
    "motherfuck", "motherfucker", "motherfucking", "fucktard", "fuckwit",
    "clusterfuck", "fuckboy", "fucknugget", "fuckstick", "fuckoff",
    "fck", "fuk", "fvck", "fuc", "fking", "fcking", "fuking",

    # S-word variations
    "shit", "shitty", "shitting", "shits", "bullshit", "shithead", "shitface",
    "shitstorm", "shithole", "dipshit", "jackshit", "chickenshit", "horseshit",
    "apeshit", "batshit", "shitbag", "shitshow", "crappy", "crap",
    "sht", "shyt", "sh1t",

    # B-word variations
    "bitch", "bitches", "bitching", "bitchy", "biatch", "bish",
    "son of a bitch", "soab", "sob", "biotch",

    # Sexual/Anatomical terms
    "dick", "dickhead", "dickface", "dicks", "dickwad", "dickweed", "dck",
    "pussy", "pussies", "puss", "psy",
    "cock", "cocks", "cocksucker", "cocksucking", "cocker",
    "penis", "penises", "vagina", "vaginas",
    "cunt", "cunts", "kunt", "cnt",
    "twat", "twats",
    "asshole", "assholes", "ass", "arse", "arsehole", "azz", "a55",
    "tits", "titties", "boobs", "boobies", "breasts", "tit",
    "ballsack", "balls", "bollocks", "testicles", "scrotum", "nutsack",
    "butthole", "anus", "rectum",

    # Insults and slurs
    "bastard", "bastards", "bstrd", "batard",
    "prick", "pricks", "prik",
    "jerk", "jerks", "jerkoff", "jerkass",
    "douche", "douchebag", "douchebags", "douchebaggery", "douch",
    "moron", "idiot", "imbecile", "idiots", "morons",
    "retard", "retarded", "tard", "rtard",
    "stupid", "dumb", "dumbass", "dumbfuck", "dumbo",
    "loser", "losers",
    "wanker", "wankers", "wank", "wanking",
    "tosser", "tossers",
    "knobhead", "knob", "bellend",
    "jackass", "numbnuts", "nimrod", "schmuck", "putz",
    "scumbag", "scum", "filth", "trash", "garbage",
    "git", "minger", "munter", "slag", "slags",

    # Racial slurs
    "coon", "coons", "chink", "chinks", "gook", "gooks",
    "spic", "spics", "spick", "wetback", "beaner", "beaners",
    "kike", "kyke", "kikes", "towelhead", "raghead",
    "cracker", "crackers", "whitey", "honky",

    # Homophobic slurs
    "fag", "faggot", "fags", "faggots", "fgt", "fagot",
    "dyke", "dykes", "dike",
    "queer", "queers",
    "tranny", "trannies", "shemale", "heshe",
    "homo", "homos", "homosexual", "poof", "poofter",

    # Sexual acts and terms
    "slut", "sluts", "slutty", "slt",
    "whore", "whores", "whor", "hore",
    "prostitute", "hooker", "harlot",
    "skank", "skanks", "skanky", "skankass",
    "tramp", "tramps",
    "blowjob", "bj", "handjob", "hj",
    "anal", "anus", "butt sex",
    "rape", "raping", "rapist", "raper",
    "molest", "molestation", "molester",
    "pedophile", "pedo", "pedos", "paedophile",

    # Bodily functions
    "piss", "pissed", "pissing", "pisses", "pee", "urinate",
    "pissoff", "pissant",
    "turd", "turds", "dump", "dumps",

    # Religious
    "damn", "damned", "dammit", "damnit", "dang",
    "goddamn", "goddammit", "goddam", "goddamnit",
    "hell", "hells", "hellish", "helluva",
    "jesus christ", "christ", "jeez", "geez",

    # Misc vulgar
    "bloody", "bleeding", "blimey",
    "bugger", "buggering", "buggered",
    "sod", "sodding", "sodoff",
    "pisshead", "shithead", "dickhead",

    # Abbreviations and leetspeak
    "wtf", "stfu", "stf", "gtfo", "kys", "fml", "bs",
    "milf", "dilf", "gilf",
    "af", "mf", "mofo",
    "smh", "omfg",
    "a$$", "a55", "sh!t", "fuk", "fuq",
    "b1tch", "d1ck", "p1ss", "cnt", "kunt",
})

FRENCH_PROFANITY: FrozenSet[str] = frozenset({
    # Core swear words
    "merde", "merdes", "merdeux", "merdeuse", "merdique", "merdier",
    "putain", "putains", "pute", "putes", "putasse",
    "bordel", "bordels",
    "chier", "chiant", "chiante", "chiants", "chieur", "chieuse",
    "foutre", "foutoir", "foutu", "foutue",

    # Insults - con family
    "con", "connard", "connards", "connasse", "connasses", "conne", "cons",
    "connerie", "conneries", "connard", "conard",

    # Insults - salaud family
    "salaud", "salauds", "salopard", "salopards", "salope", "salopes", "saloperie",
    "saligaud", "saligauds",

    # Insults - enculé family
    "enculé", "enculés", "enculée", "enculées", "enculer", "encule",
    "enculeur", "enculeuse",

    # Insults - enfoiré family
    "enfoiré", "enfoirés", "enfoirée", "enfoirées", "enfoirage",

    # Body parts
    "bite", "bites", "queue", "queues",
    "couille", "couilles", "couillon", "couillons",
    "cul", "culs", "trou du cul",
    "chatte", "chattes", "teub", "teube",
    "nichons", "nichon", "seins",
    "foufoune", "moule", "moules",

    # Sexual acts
    "baiser", "baise", "baises",
    "nique", "niquer", "niquée", "niqué", "niquez",
    "branler", "branleur", "branleuse", "branlette",
    "sucer", "suce", "suceur", "suceuse",

    # Annoying/bothering
    "emmerder", "emmerdeur", "emmerdeuse", "emmerdant", "emmerde",
    "faire chier", "tu me fais chier",
    "casse couilles", "casse-couilles", "cassecouilles",
    "gonfler", "gonflant", "gonflante",

    # Abbreviations and slang
    "fdp", "ntm", "pd", "pdp", "tg", "ftg", "vtf", "vdm", "jsp",
    "ta race", "nique ta mere", "nique ta race", "ta mere", "tmtc",
    "osef", "nik", "nk", "niquez vos meres", "nvm",
    "tpk", "ptn", "ptdr", "lol", "mdr",

    # LGBTQ+ slurs
    "pédé", "pede", "pédés", "pedes",
    "tapette", "tapettes", "tarlouze", "tarlouzes",
    "gouine", "gouines", "gouinasse",
    "travelo", "travelos",

    # Mental/physical insults
    "crétin", "crétins", "crétine", "crétines",
    "abruti", "abrutis", "abrutie", "abruties",
    "imbécile", "imbecile", "imbéciles", "imbeciles",
    "débile", "debile", "débiles", "debiles", "debilite",
    "taré", "tarée", "tarés", "tarees", "tare",
    "mongol", "mongolien", "mongolienne", "mongols",
    "attardé", "attardée", "attardés", "attarde",
    "trisomique", "autiste",
    "handicapé", "handicape",

    # Racist slurs
    "bamboula", "bamboulas",
    "bicot", "bicots", "bougnoule", "bougnoules",
    "nègre", "negre", "nègres", "negres",
    "youpin", "youpins", "youtre", "youtres",
    "raton", "ratons", "bougnoule",
    "crouille", "crouilles",

    # Multi-word phrases
    "fils de pute", "ta gueule", "ferme ta gueule",
    "va te faire foutre", "va chier", "va te faire enculer",
    "je t'emmerde", "tu me fais chier",
    "va niquer ta mere", "nique ta mere la pute",
    "ta mere la pute", "fils de chien",
    "espece de", "espèce de",
    "le cul", "mon cul",

    # Additional vulgar terms
    "ordure", "ordures", "pourriture", "pourritures",
    "raclure", "raclures", "racaille", "racailles",
    "batard", "batarde", "bâtard", "bâtarde",
    "fumier", "fumiers",
    "charogne", "charognes",
    "vermine", "vermines",
    "déchet", "déchets",

    # Sexual terms
    "prostitué", "prostituée", "prostituées",
    "pétasse", "pétasses", "petasse",
    "garce", "garces", "chienne", "chiennes",
    "trainée", "traînée", "trainee",
    "catin", "catins",

    # Body functions
    "pisser", "pisse", "pisses",
    "gerber", "gerbe", "dégueulasse", "degueulasse",
    "vomir", "vomi", "vomis",

    # Misc vulgar
    "zob", "zobs", "zgeg",
    "tepu", "tebé", "tebe",
    "bouffon", "bouffons", "bouffonne",
    "tocard", "tocards", "tocarde",
    "baltringue", "baltringues",
    "boloss", "bolos",
    "cassos", "crasseux",
    "clodo", "clochard",
    "lopette", "lopettes",
    "minable", "minables",
    "pourri", "pourrie", "pourris",

    # Variations and common misspellings
    "niker", "nike", "niké",
    "encule", "ankul", "ankuler",
    "bataclan", "sale", "salaud",
    "fdputain", "putainde", "bordelde",
})


# ==================== LEXICON STORE ====================
class LexiconStore:
    """Read-only union of one or more word sets.

    Words are lowercased and stripped on the way in; blank entries are dropped.
    Language of origin is not tracked, every word lands in the same set.
    """

    __slots__ = ("_words", "_ordered")

    def __init__(self, *word_sets: Iterable[str]):
        if not word_sets:
            word_sets = (ENGLISH_PROFANITY, FRENCH_PROFANITY)

        merged = set()
        for words in word_sets:
            for word in words:
                word = word.lower().strip()
                if word:
                    merged.add(word)

        self._words = frozenset(merged)
        self._ordered = tuple(sorted(self._words))

    def words(self) -> Iterator[str]:
        """Iterate every word in alphabetical order"""
        return iter(self._ordered)

    def __iter__(self) -> Iterator[str]:
        return self.words()

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.lower().strip() in self._words

    def __repr__(self) -> str:
        return f"LexiconStore({len(self)} words)"


@lru_cache(maxsize=1)
def default_lexicon() -> LexiconStore:
    """Shared English + French lexicon, built on first use"""
    return LexiconStore(ENGLISH_PROFANITY, FRENCH_PROFANITY)
