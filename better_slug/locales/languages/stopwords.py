"""Stop words for Latin-script locales."""

from __future__ import annotations

ENGLISH = frozenset(
    {
        "a", "an", "and", "are", "as", "at", "be", "been", "by", "for",
        "from", "has", "had", "he", "in", "is", "it", "its", "of", "on",
        "that", "the", "to", "was", "will", "with", "this", "these",
        "they", "them", "then", "there", "their", "what", "when", "where",
        "who", "which", "why", "how", "all", "would", "she", "her", "hers",
    }
)

GERMAN = frozenset(
    {
        "der", "die", "das", "den", "dem", "des", "ein", "eine", "einer",
        "einem", "eines", "und", "oder", "aber", "als", "am", "an", "auf",
        "aus", "bei", "bin", "bis", "bist", "da", "du", "er", "es", "für",
        "fuer", "haben", "hat", "ich", "ihr", "ihre", "im", "in", "ist", "kann",
        "mein", "mit", "muss", "nicht", "noch", "nur", "schon", "sein",
        "sich", "sie", "sind", "so", "über", "ueber", "um", "uns", "von",
        "war", "was", "wenn", "wer", "wie", "wir", "wird", "zu", "zur",
    }
)

FRENCH = frozenset(
    {
        "le", "la", "les", "un", "une", "des", "de", "du", "et", "à", "au",
        "aux", "ce", "ces", "cette", "dans", "il", "elle", "ils", "elles",
        "je", "tu", "nous", "vous", "leur", "leurs", "lui", "on", "ou", "où",
        "qui", "que", "quoi", "dont", "pour", "sur", "avec", "sans", "sous",
        "par", "pas", "plus", "moins", "très", "trop", "aussi", "tout", "tous",
        "toute", "toutes", "être", "avoir", "faire",
    }
)

SPANISH = frozenset(
    {
        "el", "la", "los", "las", "un", "una", "unos", "unas", "y", "o", "de",
        "del", "a", "al", "en", "con", "sin", "por", "para", "sobre", "entre",
        "tras", "ese", "esa", "esos", "esas", "este", "esta", "estos", "estas",
        "que", "quien", "cual", "como", "donde", "cuando", "porque", "es",
        "son", "fue", "era", "eran", "ser", "está", "están", "estaba", "yo",
        "tu", "él", "ella", "nosotros", "vosotros", "ellos", "ellas", "mi",
        "mis", "tus", "su", "sus", "nuestro", "nuestra", "vuestro",
    }
)

ITALIAN = frozenset(
    {
        "il", "lo", "la", "i", "gli", "le", "un", "uno", "una", "e", "ed",
        "o", "ma", "se", "perché", "anche", "come", "da", "del", "della",
        "di", "a", "al", "alla", "in", "nel", "nella", "con", "su", "sul",
        "per", "tra", "fra", "che", "è", "sono", "era", "erano", "essere",
        "ho", "hai", "ha", "abbiamo", "avete", "hanno", "avere", "questo",
        "quello", "questa", "quella", "questi", "quelli", "queste", "quelle",
        "io", "tu", "lui", "lei", "noi", "voi", "loro", "mio", "tuo", "suo",
    }
)

PORTUGUESE = frozenset(
    {
        "o", "a", "os", "as", "um", "uma", "uns", "umas", "e", "ou", "de",
        "do", "da", "dos", "das", "em", "no", "na", "nos", "nas", "por",
        "para", "com", "sem", "sob", "sobre", "entre", "que", "qual", "quais",
        "como", "onde", "quando", "porque", "é", "são", "foi", "era", "eram",
        "ser", "está", "estão", "estava", "eu", "tu", "ele", "ela", "nós",
        "vós", "eles", "elas", "meu", "minha", "meus", "minhas", "teu", "tua",
        "seu", "sua", "seus", "suas", "nosso", "nossa", "nossos", "nossas",
    }
)
