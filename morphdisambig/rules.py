"""
Hand-written disambiguation rules for Turkish.

After root selection, the candidates of a word still differ in their tags.
The distinct differing parts, sorted and joined with '$', form the
ambiguity key of the word (see CandidateSet.abbreviated_key), e.g.

    kitapların -> "P2SG+NOM$PNON+GEN"

RULES maps each known key to a resolution function. A resolution function
receives a RuleContext and returns the sub-analysis to keep (the chosen
candidate is the first one whose parse contains it), or None when it cannot
decide, in which case the caller keeps the first candidate.
"""
import logging
from collections import Counter
from typing import Callable, Dict, List, Optional

from .analysis import Analysis, ParseLattice

logger = logging.getLogger(__name__)

ABLATIVE = "ABL"
DATIVE = "DAT"
INSTRUMENTAL = "INS"


class RuleContext:
    """
    What a rule may look at when resolving the word at position index.

    The lattice gives the candidates of every word (those before index
    already narrowed to one root), previous holds the decisions taken for
    positions 0..index-1.
    """

    def __init__(self, index: int, lattice: ParseLattice, previous: List[Analysis]):
        self.index = index
        self.lattice = lattice
        self.previous = previous

    @property
    def current(self) -> Analysis:
        return self.lattice[self.index][0]

    @property
    def surface_form(self) -> str:
        return self.current.surface_form

    @property
    def root(self) -> str:
        return self.current.root

    @property
    def final_pos(self) -> str:
        return self.current.final_pos

    @property
    def is_capital_word(self) -> bool:
        return self.current.is_capital_word

    @property
    def last_word(self) -> str:
        """Surface form of the last token of the sentence (usually punctuation)."""
        return self.lattice[-1][0].surface_form

    def surface_form_at(self, index: int) -> str:
        if 0 <= index < len(self.lattice):
            return self.lattice[index][0].surface_form
        return ""

    def is_any_word_second_person(self) -> bool:
        """A previous decision carries a singular 2nd person agreement or possessive."""
        return any(a.contains_tag("A2SG") or a.contains_tag("P2SG") for a in self.previous[:self.index])

    def is_possessive_plural(self) -> bool:
        """The closest previous noun has a plural agreement or possessor."""
        for analysis in reversed(self.previous[:self.index]):
            if analysis.is_noun:
                return analysis.is_plural
        return False

    def next_word_pos(self) -> Optional[str]:
        """Most frequent part of speech among the candidates of the next word."""
        if not self.next_word_exists():
            return None
        counts = Counter(a.pos for a in self.lattice[self.index + 1])
        if not counts:
            return None
        return counts.most_common(1)[0][0]

    def is_first_word(self) -> bool:
        return self.index == 0

    def is_before_last_word(self) -> bool:
        return self.index + 2 == len(self.lattice)

    def next_word_exists(self) -> bool:
        return self.index + 1 < len(self.lattice)

    def is_next_word_noun(self) -> bool:
        return self.next_word_pos() == "NOUN"

    def is_next_word_num(self) -> bool:
        return self.next_word_pos() == "NUM"

    def is_next_word_noun_or_adjective(self) -> bool:
        return self.next_word_pos() in ("NOUN", "ADJ", "DET")

    def contains_two(self, word: str) -> bool:
        """The sentence contains word exactly twice ("ne ... ne", "ya ... ya")."""
        return sum(1 for candidates in self.lattice if candidates[0].surface_form == word) == 2

    def has_previous_word_tag(self, tag: str) -> bool:
        return self.index > 0 and self.previous[self.index - 1].contains_tag(tag)


Rule = Callable[[RuleContext], Optional[str]]

RULES: Dict[str, Rule] = {}


def rule(*keys: str):
    """Register the decorated function for every ambiguity key given."""
    def register(func: Rule) -> Rule:
        for key in keys:
            if key in RULES:
                raise ValueError(f"Duplicate disambiguation rule for {key}")
            RULES[key] = func
        return func
    return register


# --- Rule builders -----------------------------------------------------------

def always(result: str) -> Rule:
    return lambda ctx: result


def if_second_person(second: str, otherwise: str) -> Rule:
    return lambda ctx: second if ctx.is_any_word_second_person() else otherwise


def if_possessive_plural(plural: str, otherwise: str) -> Rule:
    return lambda ctx: plural if ctx.is_possessive_plural() else otherwise


def if_next_noun(noun: str, otherwise: str) -> Rule:
    return lambda ctx: noun if ctx.is_next_word_noun() else otherwise


def if_next_noun_or_adjective(modifier: str, otherwise: str) -> Rule:
    return lambda ctx: modifier if ctx.is_next_word_noun_or_adjective() else otherwise


def if_before_last_word(predicate: str, otherwise: str) -> Rule:
    return lambda ctx: predicate if ctx.is_before_last_word() else otherwise


def if_previous_tag(tag: str, postposition: str, otherwise: str) -> Rule:
    return lambda ctx: postposition if ctx.has_previous_word_tag(tag) else otherwise


def if_not_first(result: str) -> Rule:
    """Sentence-initial words stay undecided."""
    return lambda ctx: result if ctx.index > 0 else None


def if_root_in(roots, matched: str, otherwise: str) -> Rule:
    roots = frozenset(roots)
    return lambda ctx: matched if ctx.root in roots else otherwise


def if_question(question: str, otherwise: str) -> Rule:
    return lambda ctx: question if ctx.last_word == "?" else otherwise


def _install(table: Dict[str, Rule]):
    for key, func in table.items():
        rule(key)(func)


# --- Context-free rules ------------------------------------------------------

_install({
    # BİR
    "ADJ$ADV$DET$NUM+CARD": always("DET"),
    "ADV$NOUN+A3SG+PNON+NOM": always("ADV"),
    # İLE
    "CONJ$POSTP+PCNOM": always("POSTP+PCNOM"),
    # yaptık, şüphelendik
    "POS+PAST+A1PL$POS^DB+ADJ+PASTPART+PNON$POS^DB+NOUN+PASTPART+A3SG+PNON+NOM": always("POS+PAST+A1PL"),
    # ederim, yaparım
    "AOR+A1SG$AOR^DB+ADJ+ZERO^DB+NOUN+ZERO+A3SG+P1SG+NOM": always("AOR+A1SG"),
    # ancak
    "ADV$CONJ": always("CONJ"),
    # BAZI
    "ADJ$DET$PRON+QUANTP+A3SG+P3SG+NOM": always("DET"),
    # ONUN, ONA, ONDAN, ONUNLA, OYDU, ONUNKİ
    "DEMONSP$PERS": always("PERS"),
    # görülmektedir
    "POS+PROG2$POS^DB+NOUN+INF+A3SG+PNON+LOC^DB+VERB+ZERO+PRES": always("POS+PROG2"),
    # TÜM
    "DET$NOUN+A3SG+PNON+NOM": always("DET"),
    "DATE$NUM+FRACTION": always("NUM+FRACTION"),
    # giriş, satış, öpüş, vuruş
    "POS^DB+NOUN+INF3+A3SG+PNON+NOM$RECIP+POS+IMP+A2SG": always("POS^DB+NOUN+INF3+A3SG+PNON+NOM"),
    # BEN
    "NOUN+A3SG$NOUN+PROP+A3SG$PRON+PERS+A1SG": always("PRON+PERS+A1SG"),
    # BİLE
    "ADV$VERB+POS+IMP+A2SG": always("ADV"),
    # ortalamalar, uzaylılar, demokratlar
    "NOUN+ZERO+A3PL+PNON+NOM$VERB+ZERO+PRES+A3PL": always("NOUN+ZERO+A3PL+PNON+NOM"),
    # yasa, diye, yıla
    "NOUN+A3SG+PNON+DAT$VERB+POS+OPT+A3SG": always("NOUN+A3SG+PNON+DAT"),
    # BİZ, BİZE
    "NOUN+A3SG$PRON+PERS+A1PL": always("PRON+PERS+A1PL"),
    # AZDI
    "ADJ^DB+VERB+ZERO$POSTP+PCABL^DB+VERB+ZERO$VERB+POS": always("ADJ^DB+VERB+ZERO"),
    # BİRİNCİ, İKİNCİ, ÜÇÜNCÜ
    "ADJ$NUM+ORD": always("ADJ"),
    # AY
    "INTERJ$NOUN+A3SG+PNON+NOM$VERB+POS+IMP+A2SG": always("NOUN+A3SG+PNON+NOM"),
    # konuşmam, savunmam, etmem
    "NEG+AOR+A1SG$POS^DB+NOUN+INF2+A3SG+P1SG+NOM": always("NEG+AOR+A1SG"),
    # YÜZDE, YÜZLÜ
    "NOUN$NUM+CARD^DB+NOUN+ZERO": always("NOUN"),
    # almanlar, uzmanlar, elmaslar, katiller
    "ADJ^DB+VERB+ZERO+PRES+A3PL$NOUN+A3PL+PNON+NOM$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A3PL":
        always("NOUN+A3PL+PNON+NOM"),
    # fazlası, yetkilisi
    "ADJ+JUSTLIKE$NOUN+ZERO+A3SG+P3SG+NOM": always("NOUN+ZERO+A3SG+P3SG+NOM"),
    # HERKES, HERKESTEN, HERKESLE
    "NOUN+A3SG+PNON$PRON+QUANTP+A3PL+P3PL": always("PRON+QUANTP+A3PL+P3PL"),
    # BEN, BENDEN, BENCE, BANA, BENDE
    "NOUN+A3SG$PRON+PERS+A1SG": always("PRON+PERS+A1SG"),
    # karşısından, geriye, geride
    "ADJ^DB+NOUN+ZERO$NOUN": always("ADJ^DB+NOUN+ZERO"),
    # bildiğimiz, geçtiğimiz, yaşadığımız
    "ADJ+PASTPART+P1PL$NOUN+PASTPART+A3SG+P1PL+NOM": always("ADJ+PASTPART+P1PL"),
    # eminim, memnunum, açım
    "NOUN+ZERO+A3SG+P1SG+NOM$VERB+ZERO+PRES+A1SG": always("VERB+ZERO+PRES+A1SG"),
    # yaparlar, olabilirler, değiştirirler
    "AOR+A3PL$AOR^DB+ADJ+ZERO^DB+NOUN+ZERO+A3PL+PNON+NOM": always("AOR+A3PL"),
    # etmeyecek, yapmayacak, koşmayacak
    "NEG+FUT+A3SG$NEG^DB+ADJ+FUTPART+PNON": always("NEG+FUT+A3SG"),
    # yavaşça, dürüstçe, fazlaca
    "ADJ+ASIF$ADV+LY$NOUN+ZERO+A3SG+PNON+EQU": always("ADV+LY"),
    # sürmekte, beklenmekte, değişmekte
    "POS+PROG2+A3SG$POS^DB+NOUN+INF+A3SG+PNON+LOC": always("POS+PROG2+A3SG"),
    # KİMSE, KİMSEDE, KİMSEYE
    "NOUN+A3SG+PNON$PRON+QUANTP+A3SG+P3SG": always("PRON+QUANTP+A3SG+P3SG"),
    # ikisini, ikisine, fazlasına
    "ADJ+JUSTLIKE^DB+NOUN+ZERO+A3SG+P2SG$NOUN+ZERO+A3SG+P3SG": always("NOUN+ZERO+A3SG+P3SG"),
    # HEP
    "ADV$PRON+QUANTP+A3SG+P3SG+NOM": always("ADV"),
    # yapmalıyız, etmeliyiz, alınmalıdır
    "POS+NECES$POS^DB+NOUN+INF2+A3SG+PNON+NOM^DB+ADJ+WITH^DB+VERB+ZERO+PRES": always("POS+NECES"),
    # kızdı, çekti, bozdu
    "ADJ^DB+VERB+ZERO$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO$VERB+POS": always("VERB+POS"),
    # BİZİMLE
    "NOUN+A3SG+P1SG$PRON+PERS+A1PL+PNON": always("PRON+PERS+A1PL+PNON"),
    # VARDIR
    "ADJ^DB+VERB+ZERO+PRES+COP+A3SG$VERB^DB+VERB+CAUS+POS+IMP+A2SG": always("ADJ^DB+VERB+ZERO+PRES+COP+A3SG"),
    # Mİ
    "NOUN+A3SG+PNON+NOM$QUES+PRES+A3SG": always("QUES+PRES+A3SG"),
    # BENİM
    "NOUN+A3SG+P1SG+NOM$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A1SG$PRON+PERS+A1SG+PNON+GEN"
    "$PRON+PERS+A1SG+PNON+NOM^DB+VERB+ZERO+PRES+A1SG": always("PRON+PERS+A1SG+PNON+GEN"),
    # SUN
    "NOUN+PROP+A3SG+PNON+NOM$VERB+POS+IMP+A2SG": always("NOUN+PROP+A3SG+PNON+NOM"),
    "ADJ+JUSTLIKE$NOUN+ZERO+A3SG+P3SG+NOM$NOUN+ZERO^DB+ADJ+ALMOST": always("NOUN+ZERO+A3SG+P3SG+NOM"),
    # düşündük, ettik, kazandık
    "NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PAST+A1PL$VERB+POS+PAST+A1PL$VERB+POS^DB+ADJ+PASTPART+PNON"
    "$VERB+POS^DB+NOUN+PASTPART+A3SG+PNON+NOM": always("VERB+POS+PAST+A1PL"),
    # komiktir, eksiktir, mevcuttur, yoktur
    "ADJ^DB+VERB+ZERO+PRES+COP+A3SG$NOUN+A3SG+PNON+NOM^DB+ADV+SINCE$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+COP+A3SG":
        always("ADJ^DB+VERB+ZERO+PRES+COP+A3SG"),
    # edeceğim, koşacağım, gideceğim
    "POS+FUT+A1SG$POS^DB+ADJ+FUTPART+P1SG$POS^DB+NOUN+FUTPART+A3SG+P1SG+NOM": always("POS+FUT+A1SG"),
    # A
    "ADJ$INTERJ$NOUN+PROP+A3SG+PNON+NOM": always("NOUN+PROP+A3SG+PNON+NOM"),
    # BİZİ
    "NOUN+A3SG+P3SG+NOM$NOUN+A3SG+PNON+ACC$PRON+PERS+A1PL+PNON+ACC": always("PRON+PERS+A1PL+PNON+ACC"),
    # BİZİM
    "NOUN+A3SG+P1SG+NOM$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A1SG$PRON+PERS+A1PL+PNON+GEN"
    "$PRON+PERS+A1PL+PNON+NOM^DB+VERB+ZERO+PRES+A1SG": always("PRON+PERS+A1PL+PNON+GEN"),
    # erkekler, kadınlar, madenler
    "ADJ^DB+VERB+ZERO+PRES+A3PL$NOUN+A3PL+PNON+NOM$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A3PL"
    "$NOUN+PROP+A3PL+PNON+NOM": always("NOUN+A3PL+PNON+NOM"),
    # TABİ
    "ADJ$INTERJ": always("ADJ"),
    "AOR+A2PL$AOR^DB+ADJ+ZERO^DB+ADJ+JUSTLIKE^DB+NOUN+ZERO+A3SG+P2PL+NOM": always("AOR+A2PL"),
    # ödeyecekler, olacaklar
    "POS+FUT+A3PL$POS^DB+NOUN+FUTPART+A3PL+PNON+NOM": always("POS+FUT+A3PL"),
    # 9:30'daki
    "P3SG$PNON": always("PNON"),
    # TV, CD
    "A3SG+PNON+ACC$PROP+A3SG+PNON+NOM": always("A3SG+PNON+ACC"),
    # değinmeyeceğim, vermeyeceğim
    "NEG+FUT+A1SG$NEG^DB+ADJ+FUTPART+P1SG$NEG^DB+NOUN+FUTPART+A3SG+P1SG+NOM": always("NEG+FUT+A1SG"),
    # görünüşe, satışa, duruşa
    "POS^DB+NOUN+INF3+A3SG+PNON+DAT$RECIP+POS+OPT+A3SG": always("POS^DB+NOUN+INF3+A3SG+PNON+DAT"),
    # BENİ
    "NOUN+A3SG+P3SG+NOM$NOUN+A3SG+PNON+ACC$PRON+PERS+A1SG+PNON+ACC": always("PRON+PERS+A1SG+PNON+ACC"),
    # edemezsin, kanıtlarsın, yapamazsın
    "AOR+A2SG$AOR^DB+ADJ+ZERO^DB+ADJ+JUSTLIKE^DB+NOUN+ZERO+A3SG+P2SG+NOM": always("AOR+A2SG"),
    # GÜCÜNÜ, GÜCÜNÜN, ESASINDA
    "ADJ^DB+NOUN+ZERO+A3SG+P2SG$ADJ^DB+NOUN+ZERO+A3SG+P3SG$NOUN+A3SG+P2SG$NOUN+A3SG+P3SG":
        always("NOUN+A3SG+P3SG"),
    # YILININ, YOLUNUN, DİLİNİN
    "NOUN+A3SG+P2SG+GEN$NOUN+A3SG+P3SG+GEN$VERB^DB+VERB+PASS+POS+IMP+A2PL": always("NOUN+A3SG+P3SG+GEN"),
    # ÇIKARDI
    "VERB+POS+AOR$VERB^DB+VERB+CAUS+POS": always("VERB+POS+AOR"),
    # sunucularımız, rakiplerimiz, yayınlarımız
    "P1PL+NOM$P1SG+NOM^DB+VERB+ZERO+PRES+A1PL": always("P1PL+NOM"),
    # etmiştir, artmıştır, düşünmüştür
    "NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+NARR+A3SG+COP$VERB+POS+NARR+COP+A3SG": always("VERB+POS+NARR+COP+A3SG"),
    # hazırlandı, yuvarlandı, temizlendi
    "VERB+REFLEX$VERB^DB+VERB+PASS": always("VERB^DB+VERB+PASS"),
    "ADJ+AGT^DB+ADJ+JUSTLIKE$NOUN+AGT+A3SG+P3SG+NOM$NOUN+AGT^DB+ADJ+ALMOST": always("NOUN+AGT+A3SG+P3SG+NOM"),
    # VARSA
    "ADJ^DB+VERB+ZERO+COND$VERB+POS+DESR": always("ADJ^DB+VERB+ZERO+COND"),
    # DEK
    "NOUN+A3SG+PNON+NOM$POSTP+PCDAT": always("POSTP+PCDAT"),
    # ALDIK
    "ADJ^DB+VERB+ZERO+PAST+A1PL$VERB+POS+PAST+A1PL$VERB+POS^DB+ADJ+PASTPART+PNON"
    "$VERB+POS^DB+NOUN+PASTPART+A3SG+PNON+NOM": always("VERB+POS+PAST+A1PL"),
    # BİRİNİN, BİRİNE, BİRİNİ, BİRİNDEN
    "ADJ^DB+NOUN+ZERO+A3SG+P2SG$ADJ^DB+NOUN+ZERO+A3SG+P3SG$NUM+CARD^DB+NOUN+ZERO+A3SG+P2SG"
    "$NUM+CARD^DB+NOUN+ZERO+A3SG+P3SG": always("NUM+CARD^DB+NOUN+ZERO+A3SG+P3SG"),
    # ARTIK
    "ADJ$ADV$NOUN+A3SG+PNON+NOM$NOUN+PROP+A3SG+PNON+NOM": always("ADV"),
    # BİRİ
    "ADJ^DB+NOUN+ZERO+A3SG+P3SG+NOM$ADJ^DB+NOUN+ZERO+A3SG+PNON+ACC$NUM+CARD^DB+NOUN+ZERO+A3SG+P3SG+NOM"
    "$NUM+CARD^DB+NOUN+ZERO+A3SG+PNON+ACC": always("NUM+CARD^DB+NOUN+ZERO+A3SG+P3SG+NOM"),
    # ALINDI
    "ADJ^DB+NOUN+ZERO+A3SG+P2SG+NOM^DB+VERB+ZERO$ADJ^DB+NOUN+ZERO+A3SG+PNON+GEN^DB+VERB+ZERO"
    "$VERB^DB+VERB+PASS+POS": always("VERB^DB+VERB+PASS+POS"),
    # KIZIM
    "ADJ^DB+VERB+ZERO+PRES+A1SG$NOUN+A3SG+P1SG+NOM$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A1SG":
        always("NOUN+A3SG+P1SG+NOM"),
    # etmeliydi, yaratmalıydı
    "POS+NECES$POS^DB+NOUN+INF2+A3SG+PNON+NOM^DB+ADJ+WITH^DB+VERB+ZERO": always("POS+NECES"),
    # HERKESİN
    "NOUN+A3SG+P2SG+NOM$NOUN+A3SG+PNON+GEN$PRON+QUANTP+A3PL+P3PL+GEN": always("PRON+QUANTP+A3PL+P3PL+GEN"),
    "ADJ+JUSTLIKE^DB+NOUN+ZERO+A3SG+P2SG$ADJ+JUSTLIKE^DB+NOUN+ZERO+A3SG+PNON$NOUN+ZERO+A3SG+P3SG":
        always("NOUN+ZERO+A3SG+P3SG"),
    # milyarlık, milyonluk, beşlik
    "NESS+A3SG+PNON+NOM$ZERO+A3SG+PNON+NOM^DB+ADJ+FITFOR": always("ZERO+A3SG+PNON+NOM^DB+ADJ+FITFOR"),
    # alınmamaktadır, koymamaktadır
    "NEG+PROG2$NEG^DB+NOUN+INF+A3SG+PNON+LOC^DB+VERB+ZERO+PRES": always("NEG+PROG2"),
    # HEPİMİZ
    "A1PL+P1PL+NOM$A3SG+P3SG+GEN^DB+VERB+ZERO+PRES+A1PL": always("A1PL+P1PL+NOM"),
    # KİMSENİN
    "NOUN+A3SG+P2SG$NOUN+A3SG+PNON$PRON+QUANTP+A3SG+P3SG": always("PRON+QUANTP+A3SG+P3SG"),
    # MİSİN, MİYDİ, MİSİNİZ
    "NOUN+A3SG+PNON+NOM^DB+VERB+ZERO$QUES": always("QUES"),
    # ATAKLAR, GÜÇLER, ESASLAR
    "ADJ^DB+NOUN+ZERO+A3PL+PNON+NOM$ADJ^DB+VERB+ZERO+PRES+A3PL$NOUN+A3PL+PNON+NOM"
    "$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A3PL": always("NOUN+A3PL+PNON+NOM"),
    "A3PL+P3SG$A3SG+P3PL$PROP+A3PL+P3PL": always("PROP+A3PL+P3PL"),
    # pilotunuz, suçunuz, haberiniz
    "P2PL+NOM$PNON+GEN^DB+VERB+ZERO+PRES+A1PL": always("P2PL+NOM"),
    # olun, kurtulun, gelin
    "VERB+POS+IMP+A2PL$VERB^DB+VERB+PASS+POS+IMP+A2SG": always("VERB+POS+IMP+A2PL"),
    "ADJ+JUSTLIKE^DB$NOUN+ZERO+A3SG+P3SG+NOM^DB": always("NOUN+ZERO+A3SG+P3SG+NOM^DB"),
    # oluşmaktaydı, gerekemekteydi
    "POS+PROG2$POS^DB+NOUN+INF+A3SG+PNON+LOC^DB+VERB+ZERO": always("POS+PROG2"),
    # BİN, KIRK
    "NUM+CARD$VERB+POS+IMP+A2SG": always("NUM+CARD"),
    # BENİMLE
    "NOUN+A3SG+P1SG$PRON+PERS+A1SG+PNON": always("PRON+PERS+A1SG+PNON"),
    "ADV+WITHOUTHAVINGDONESO$NOUN+INF2+A3SG+PNON+ABL": always("ADV+WITHOUTHAVINGDONESO"),
    "ADJ^DB+NOUN+ZERO+A3SG+P3SG+NOM$ADJ^DB+NOUN+ZERO+A3SG+PNON+ACC$NOUN+A3SG+P3SG+NOM$NOUN+A3SG+PNON+ACC":
        always("ADJ^DB+NOUN+ZERO+A3SG+P3SG+NOM"),
    "A3PL+PNON+NOM$A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A3PL": always("A3PL+PNON+NOM"),
    "CONJ$VERB+POS+IMP+A2SG": always("CONJ"),
    "NEG+IMP+A2SG$POS^DB+NOUN+INF2+A3SG+PNON+NOM": always("POS^DB+NOUN+INF2+A3SG+PNON+NOM"),
    "NEG+OPT+A3SG$POS^DB+NOUN+INF2+A3SG+PNON+DAT": always("POS^DB+NOUN+INF2+A3SG+PNON+DAT"),
    "NOUN+A3SG+P3SG+NOM$NOUN^DB+ADJ+ALMOST": always("NOUN+A3SG+P3SG+NOM"),
    "ADJ$VERB+POS+IMP+A2SG": always("ADJ"),
    "NOUN+A3SG+PNON+NOM$VERB+POS+IMP+A2SG": always("NOUN+A3SG+PNON+NOM"),
    "INF2+A3SG+P3SG+NOM$INF2^DB+ADJ+ALMOST": always("INF2+A3SG+P3SG+NOM"),
})


# --- Agreement with earlier words --------------------------------------------

_install({
    # kısmını, duracağını, grubunun
    "P2SG$P3SG": if_second_person("P2SG", "P3SG"),
    "A2SG+P2SG$A3SG+P3SG": if_second_person("A2SG+P2SG", "A3SG+P3SG"),
    # şirketin, seçimlerin, kitapların
    "P2SG+NOM$PNON+GEN": if_second_person("P2SG+NOM", "PNON+GEN"),
    "P2SG$PNON": if_second_person("P2SG", "PNON"),
    # yılın, yolun
    "NOUN+A3SG+P2SG+NOM$NOUN+A3SG+PNON+GEN$VERB+POS+IMP+A2PL$VERB^DB+VERB+PASS+POS+IMP+A2SG":
        if_second_person("NOUN+A3SG+P2SG+NOM", "NOUN+A3SG+PNON+GEN"),
    # artışın, düşüşün, yükselişin
    "POS^DB+NOUN+INF3+A3SG+P2SG+NOM$POS^DB+NOUN+INF3+A3SG+PNON+GEN$RECIP+POS+IMP+A2PL":
        if_second_person("POS^DB+NOUN+INF3+A3SG+P2SG+NOM", "POS^DB+NOUN+INF3+A3SG+PNON+GEN"),
    # YILINA, DİLİNE, YOLUNA
    "NOUN+A3SG+P2SG+DAT$NOUN+A3SG+P3SG+DAT$VERB^DB+VERB+PASS+POS+OPT+A3SG":
        if_second_person("NOUN+A3SG+P2SG+DAT", "NOUN+A3SG+P3SG+DAT"),
    # tahminleri, işleri, hisseleri
    "A3PL+P3PL+NOM$A3PL+P3SG+NOM$A3PL+PNON+ACC$A3SG+P3PL+NOM":
        if_possessive_plural("A3SG+P3PL+NOM", "A3PL+P3SG+NOM"),
    "A3PL+P3PL$A3PL+P3SG$A3SG+P3PL": if_possessive_plural("A3SG+P3PL", "A3PL+P3SG"),
    # demiryolları, havayolları, milletvekilleri
    "P3PL+NOM$P3SG+NOM$PNON+ACC": if_possessive_plural("P3PL+NOM", "P3SG+NOM"),
})


@rule("A3PL+P2SG$A3PL+P3PL$A3PL+P3SG$A3SG+P3PL")
def plural_possessive(ctx):
    # fanatiklerini, senetlerini, olduklarını
    if ctx.is_any_word_second_person():
        return "A3PL+P2SG"
    if ctx.is_possessive_plural():
        return "A3SG+P3PL"
    return "A3PL+P3SG"


@rule("P2SG$P3PL$P3SG")
def compound_possessive(ctx):
    # havayollarına, gözyaşlarına
    if ctx.is_any_word_second_person():
        return "P2SG"
    if ctx.is_possessive_plural():
        return "P3PL"
    return "P3SG"


# --- Modifier or head, decided by the next word ------------------------------

_install({
    "ADJ$NOUN+A3SG+PNON+NOM": if_next_noun_or_adjective("ADJ", "NOUN+A3SG+PNON+NOM"),
    "ADJ$NOUN+A3SG+PNON+NOM$VERB+POS+IMP+A2SG": if_next_noun_or_adjective("ADJ", "NOUN+A3SG+PNON+NOM"),
    # yaptığı, ettiği
    "ADJ+PASTPART+P3SG$NOUN+PASTPART+A3SG+P3SG+NOM":
        if_next_noun_or_adjective("ADJ+PASTPART+P3SG", "NOUN+PASTPART+A3SG+P3SG+NOM"),
    # ödediğim
    "ADJ+PASTPART+P1SG$NOUN+PASTPART+A3SG+P1SG+NOM":
        if_next_noun_or_adjective("ADJ+PASTPART+P1SG", "NOUN+PASTPART+A3SG+P1SG+NOM"),
    # yapıcı, verici
    "ADJ+AGT$NOUN+AGT+A3SG+PNON+NOM": if_next_noun_or_adjective("ADJ+AGT", "NOUN+AGT+A3SG+PNON+NOM"),
    # gideceği, kalacağı
    "ADJ+FUTPART+P3SG$NOUN+FUTPART+A3SG+P3SG+NOM":
        if_next_noun_or_adjective("ADJ+FUTPART+P3SG", "NOUN+FUTPART+A3SG+P3SG+NOM"),
    # olabilecek, yapabilecek
    "ABLE+FUT+A3SG$ABLE^DB+ADJ+FUTPART+PNON": if_next_noun_or_adjective("ABLE^DB+ADJ+FUTPART+PNON", "ABLE+FUT+A3SG"),
    # bilmediğiniz, sevdiğiniz, kazandığınız
    "ADJ+PASTPART+P2PL$NOUN+PASTPART+A3SG+P2PL+NOM$NOUN+PASTPART+A3SG+PNON+GEN^DB+VERB+ZERO+PRES+A1PL":
        if_next_noun_or_adjective("ADJ+PASTPART+P2PL", "NOUN+PASTPART+A3SG+P2PL+NOM"),
    # GEÇMİŞ, ALMIŞ, VARMIŞ
    "ADJ^DB+VERB+ZERO+NARR+A3SG$VERB+POS+NARR+A3SG$VERB+POS+NARR^DB+ADJ+ZERO":
        if_next_noun_or_adjective("VERB+POS+NARR^DB+ADJ+ZERO", "VERB+POS+NARR+A3SG"),
    # yapacağınız, konuşabileceğiniz, olacağınız
    "ADJ+FUTPART+P2PL$NOUN+FUTPART+A3SG+P2PL+NOM$NOUN+FUTPART+A3SG+PNON+GEN^DB+VERB+ZERO+PRES+A1PL":
        if_next_noun_or_adjective("ADJ+FUTPART+P2PL", "NOUN+FUTPART+A3SG+P2PL+NOM"),
    # yıllarca, aylarca, düşmanca
    "ADJ+ASIF$ADV+LY": if_next_noun_or_adjective("ADJ+ASIF", "ADV+LY"),
    # gerçekçi, alıcı
    "ADJ^DB+NOUN+AGT+A3SG+PNON+NOM$NOUN+A3SG+PNON+NOM^DB+ADJ+AGT":
        if_next_noun_or_adjective("NOUN+A3SG+PNON+NOM^DB+ADJ+AGT", "ADJ^DB+NOUN+AGT+A3SG+PNON+NOM"),
    # BU, ŞU
    "DET$PRON+DEMONSP+A3SG+PNON+NOM": if_next_noun("DET", "PRON+DEMONSP+A3SG+PNON+NOM"),
    "ADJ$ADV": if_next_noun("ADJ", "ADV"),
    # O
    "DET$PRON+DEMONSP+A3SG+PNON+NOM$PRON+PERS+A3SG+PNON+NOM": if_next_noun("DET", "PRON+PERS+A3SG+PNON+NOM"),
    "DET$NOUN+PROP+A3SG+PNON+NOM$PRON+DEMONSP+A3SG+PNON+NOM$PRON+PERS+A3SG+PNON+NOM":
        if_next_noun("DET", "PRON+PERS+A3SG+PNON+NOM"),
})


@rule("ADJ+PASTPART+P3PL$NOUN+PASTPART+A3PL+P3PL+NOM$NOUN+PASTPART+A3PL+P3SG+NOM$NOUN+PASTPART+A3SG+P3PL+NOM")
def past_participle_third_plural(ctx):
    # kaybettikleri, umdukları, gösterdikleri
    if ctx.is_next_word_noun_or_adjective():
        return "ADJ+PASTPART+P3PL"
    if ctx.is_possessive_plural():
        return "NOUN+PASTPART+A3SG+P3PL+NOM"
    return "NOUN+PASTPART+A3PL+P3SG+NOM"


@rule("ADJ+FUTPART+P3PL$NOUN+FUTPART+A3PL+P3PL+NOM$NOUN+FUTPART+A3PL+P3SG+NOM$NOUN+FUTPART+A3PL+PNON+ACC"
      "$NOUN+FUTPART+A3SG+P3PL+NOM")
def future_participle_third_plural(ctx):
    # yapabilecekleri, edebilecekleri, sunabilecekleri
    if ctx.is_next_word_noun_or_adjective():
        return "ADJ+FUTPART+P3PL"
    if ctx.is_possessive_plural():
        return "NOUN+FUTPART+A3SG+P3PL+NOM"
    return "NOUN+FUTPART+A3PL+P3SG+NOM"


@rule("NOUN+A3SG+PNON+NOM$NUM+CARD$VERB+POS+IMP+A2SG")
def number_or_noun(ctx):
    # YÜZ
    if ctx.is_next_word_num():
        return "NUM+CARD"
    return "NOUN+A3SG+PNON+NOM"


# --- Predicate position (the word just before the final punctuation) ---------

_install({
    # etti, kırdı
    "NOUN+A3SG+PNON+NOM^DB+VERB+ZERO$VERB+POS": lambda ctx: "VERB+POS" if ctx.is_before_last_word() else None,
    # gelecek
    "POS+FUT+A3SG$POS^DB+ADJ+FUTPART+PNON": if_before_last_word("POS+FUT+A3SG", "POS^DB+ADJ+FUTPART+PNON"),
    "NARR+A3SG$NARR^DB+ADJ+ZERO": if_before_last_word("NARR+A3SG", "NARR^DB+ADJ+ZERO"),
    # ayın, düşünün
    "NOUN+A3SG+P2SG+NOM$NOUN+A3SG+PNON+GEN$VERB+POS+IMP+A2PL":
        if_before_last_word("VERB+POS+IMP+A2PL", "NOUN+A3SG+PNON+GEN"),
    # düşmüş, duymuş, artmış
    "NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+NARR+A3SG$VERB+POS+NARR+A3SG$VERB+POS+NARR^DB+ADJ+ZERO":
        if_before_last_word("VERB+POS+NARR+A3SG", "VERB+POS+NARR^DB+ADJ+ZERO"),
})


@rule("AOR+A3SG$AOR^DB+ADJ+ZERO")
def aorist(ctx):
    # gelebilir
    if ctx.is_before_last_word():
        return "AOR+A3SG"
    if ctx.is_first_word():
        return "AOR^DB+ADJ+ZERO"
    if ctx.is_next_word_noun_or_adjective():
        return "AOR^DB+ADJ+ZERO"
    return "AOR+A3SG"


@rule("POS+NECES+A3SG$POS^DB+NOUN+INF2+A3SG+PNON+NOM^DB+ADJ+WITH")
def necessitative(ctx):
    # etmeli, olmalı
    if ctx.is_before_last_word():
        return "POS+NECES+A3SG"
    if ctx.is_next_word_noun_or_adjective():
        return "POS^DB+NOUN+INF2+A3SG+PNON+NOM^DB+ADJ+WITH"
    return "POS+NECES+A3SG"


@rule("P1SG+NOM$PNON+NOM^DB+VERB+ZERO+PRES+A1SG")
def first_person_copula(ctx):
    if ctx.is_before_last_word() or ctx.root == "değil":
        return "PNON+NOM^DB+VERB+ZERO+PRES+A1SG"
    return "P1SG+NOM"


# --- Postpositions governed by the case of the previous word -----------------

_install({
    # ÖNCE, SONRA
    "ADV$NOUN+A3SG+PNON+NOM$POSTP+PCABL": if_previous_tag(ABLATIVE, "POSTP+PCABL", "ADV"),
    # başka, yukarı
    "ADJ$POSTP+PCABL": if_previous_tag(ABLATIVE, "POSTP+PCABL", "ADJ"),
    # BİRLİKTE
    "ADV$POSTP+PCINS": if_previous_tag(INSTRUMENTAL, "POSTP+PCINS", "ADV"),
    # FAZLADIR, FAZLAYDI, ÇOKTU, ÇOKTUR
    "ADJ^DB$POSTP+PCABL^DB": if_previous_tag(ABLATIVE, "POSTP+PCABL^DB", "ADJ^DB"),
    # DOĞRU
    "ADJ$NOUN+A3SG+PNON+NOM$POSTP+PCDAT": if_previous_tag(DATIVE, "POSTP+PCDAT", "ADJ"),
    "ADJ$NOUN+A3SG+PNON+NOM$NOUN+PROP+A3SG+PNON+NOM$POSTP+PCDAT": if_previous_tag(DATIVE, "POSTP+PCDAT", "ADJ"),
    # BERİ, DIŞARI, AŞAĞI
    "ADJ$ADV$NOUN+A3SG+PNON+NOM$POSTP+PCABL": if_previous_tag(ABLATIVE, "POSTP+PCABL", "ADV"),
    # ÖTE
    "NOUN+A3SG+PNON+NOM$POSTP+PCABL": if_previous_tag(ABLATIVE, "POSTP+PCABL", "NOUN+A3SG+PNON+NOM"),
})


@rule("ADJ$ADV$DET$POSTP+PCABL", "ADJ$ADV$POSTP+PCABL")
def quantity_adverb(ctx):
    # ÇOK, FAZLA
    if ctx.has_previous_word_tag(ABLATIVE):
        return "POSTP+PCABL"
    next_pos = ctx.next_word_pos()
    if next_pos == "NOUN":
        return "ADJ"
    if next_pos in ("ADJ", "ADV", "VERB"):
        return "ADV"
    return None


@rule("ADJ$ADV$POSTP+PCABL$VERB+POS+IMP+A2SG")
def az(ctx):
    # AZ
    if ctx.has_previous_word_tag(ABLATIVE):
        return "POSTP+PCABL"
    if ctx.is_next_word_noun_or_adjective():
        return "ADJ"
    return "ADV"


@rule("ADJ$ADV$NOUN+A3SG+PNON+NOM$POSTP+PCDAT")
def karsi(ctx):
    # KARŞI
    if ctx.has_previous_word_tag(DATIVE):
        return "POSTP+PCDAT"
    if ctx.is_next_word_noun():
        return "ADJ"
    return "ADV"


@rule("ADJ$ADV$POSTP+PCINS")
def beraber(ctx):
    # BERABER
    if ctx.has_previous_word_tag(INSTRUMENTAL):
        return "POSTP+PCINS"
    if ctx.is_next_word_noun_or_adjective():
        return "ADJ"
    return "ADV"


# --- Proper nouns: capitalisation is only informative after the first word ---

_install({
    # Ocak, Cuma, ABD
    "A3SG$PROP+A3SG": if_not_first("PROP+A3SG"),
    "ADJ$NOUN+PROP+A3SG+PNON+NOM": if_not_first("NOUN+PROP+A3SG+PNON+NOM"),
    # san, yasa
    "NOUN+A3SG+PNON+NOM$NOUN+PROP+A3SG+PNON+NOM$VERB+POS+IMP+A2SG": if_not_first("NOUN+PROP+A3SG+PNON+NOM"),
    # DE
    "CONJ$NOUN+PROP+A3SG+PNON+NOM$VERB+POS+IMP+A2SG": if_not_first("NOUN+PROP+A3SG+PNON+NOM"),
})


@rule("ADJ$NOUN+A3SG+PNON+NOM$NOUN+PROP+A3SG+PNON+NOM")
def adjective_noun_or_name(ctx):
    if ctx.index > 0:
        return "NOUN+PROP+A3SG+PNON+NOM"
    if ctx.is_next_word_noun_or_adjective():
        return "ADJ"
    return "NOUN+A3SG+PNON+NOM"


@rule("A3PL+PNON+NOM$A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A3PL$PROP+A3PL+PNON+NOM")
def plural_or_plural_name(ctx):
    # hazineler, kıymetler
    if ctx.index > 0:
        if ctx.is_capital_word:
            return "PROP+A3PL+PNON+NOM"
        return "A3PL+PNON+NOM"
    return None


@rule("ADJ$NOUN+A3SG+PNON+NOM$NOUN+PROP+A3SG+PNON+NOM$VERB+POS+IMP+A2SG")
def adjective_or_name(ctx):
    # KARA, ÇEK, SOL, KOCA
    if ctx.index > 0:
        if ctx.is_capital_word:
            return "NOUN+PROP+A3SG+PNON+NOM"
        return "ADJ"
    return None


@rule("P3SG+NOM$PNON+ACC")
def possessive_or_accusative(ctx):
    if ctx.final_pos == "PROP":
        return "PNON+ACC"
    return "P3SG+NOM"


# --- Decided by the root or the surface form itself ---------------------------

_install({
    "ADJ^DB$NOUN+A3SG+PNON+NOM^DB": if_root_in(
        ("yok", "düşük", "eksik", "rahat", "orta", "vasat"), "ADJ^DB", "NOUN+A3SG+PNON+NOM^DB"),
    # kişilerdir, aylardır, yıllardır
    "A3PL+PNON+NOM^DB+ADV+SINCE$A3PL+PNON+NOM^DB+VERB+ZERO+PRES+COP+A3SG$A3SG+PNON+NOM^DB+VERB+ZERO+PRES+A3PL+COP":
        if_root_in(("yıl", "süre", "zaman", "ay"),
                   "A3PL+PNON+NOM^DB+ADV+SINCE", "A3PL+PNON+NOM^DB+VERB+ZERO+PRES+COP+A3SG"),
    # YILDIR, AYDIR, YOLDUR
    "NOUN+A3SG+PNON+NOM^DB+ADV+SINCE$NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+COP+A3SG$VERB^DB+VERB+CAUS+POS+IMP+A2SG":
        if_root_in(("yıl", "ay"),
                   "NOUN+A3SG+PNON+NOM^DB+ADV+SINCE", "NOUN+A3SG+PNON+NOM^DB+VERB+ZERO+PRES+COP+A3SG"),
    "ADV+SINCE$VERB+ZERO+PRES+COP+A3SG": if_root_in(
        ("yıl", "süre", "zaman", "ay"), "ADV+SINCE", "VERB+ZERO+PRES+COP+A3SG"),
    # BÜYÜME, ATAMA, KARIMA, KORUMA
    "NOUN+A3SG+P1SG+DAT$VERB+NEG+IMP+A2SG$VERB+POS^DB+NOUN+INF2+A3SG+PNON+NOM": if_root_in(
        ("karı",), "NOUN+A3SG+P1SG+DAT", "VERB+POS^DB+NOUN+INF2+A3SG+PNON+NOM"),
})


@rule("ADJ^DB+VERB+ZERO$VERB+POS")
def var_or_verb(ctx):
    # geçti, vardı, aldı
    if ctx.root == "var" and not ctx.is_possessive_plural():
        return "ADJ^DB+VERB+ZERO"
    return "VERB+POS"


@rule("ADJ$ADV$NOUN+A3SG+PNON+NOM")
def artik_or_geri(ctx):
    # ARTIK, GERİ
    if ctx.root == "artık":
        return "ADV"
    if ctx.is_next_word_noun():
        return "ADJ"
    return "ADV"


@rule("NEG+PAST+A1PL$NEG^DB+ADJ+PASTPART+PNON$NEG^DB+NOUN+PASTPART+A3SG+PNON+NOM")
def negative_past(ctx):
    # görülmedik
    if ctx.surface_form == "alışılmadık":
        return "NEG^DB+ADJ+PASTPART+PNON"
    return "NEG+PAST+A1PL"


@rule("ADJ$ADV$VERB+POS+IMP+A2SG")
def gec_or_sik(ctx):
    # GEÇ, SIK; "sık sık" is an adverb
    if ctx.surface_form == "sık":
        if ctx.surface_form_at(ctx.index - 1) == "sık" or ctx.surface_form_at(ctx.index + 1) == "sık":
            return "ADV"
    if ctx.is_next_word_noun():
        return "ADJ"
    return "ADV"


# --- Questions and paired conjunctions ---------------------------------------

_install({
    # HANGİ
    "ADJ$PRON+QUESP+A3SG+PNON+NOM": if_question("PRON+QUESP+A3SG+PNON+NOM", "ADJ"),
    # KİM
    "NOUN+PROP$PRON+QUESP": if_question("PRON+QUESP", "NOUN+PROP"),
})


@rule("ADJ$ADV$CONJ$PRON+QUESP+A3SG+PNON+NOM")
def ne(ctx):
    # NE; "ne ... ne" is a conjunction
    if ctx.last_word == "?":
        return "PRON+QUESP+A3SG+PNON+NOM"
    if ctx.contains_two("ne"):
        return "CONJ"
    if ctx.is_next_word_noun():
        return "ADJ"
    return "ADV"


@rule("CONJ$INTERJ")
def ya(ctx):
    # YA; "ya ... ya" and "ya da" are conjunctions
    if ctx.contains_two("ya"):
        return "CONJ"
    if ctx.next_word_exists() and ctx.surface_form_at(ctx.index + 1) == "da":
        return "CONJ"
    return "INTERJ"


@rule("CONJ$NOUN+A3SG+PNON+NOM$VERB+POS+IMP+A2SG")
def gerek(ctx):
    # GEREK; "gerek ... gerek" is a conjunction
    if ctx.contains_two("gerek"):
        return "CONJ"
    return "NOUN+A3SG+PNON+NOM"


def select_case(key: str, ctx: RuleContext) -> Optional[str]:
    """
    Resolve an ambiguity key.

    Returns:
        The sub-analysis to keep, or None when the key is unknown or the
        rule cannot decide in this context.
    """
    resolve = RULES.get(key)
    if resolve is None:
        logger.debug(f"No rule for ambiguity key '{key}' at position {ctx.index}")
        return None
    return resolve(ctx)


def case_disambiguator(index: int, lattice: ParseLattice, previous: List[Analysis]) -> Optional[Analysis]:
    """
    Apply the rule table to the word at index.

    Args:
        index: Position of the current word
        lattice: Candidate sets of the sentence, the current one already
            narrowed to a single root
        previous: Decisions for positions 0..index-1

    Returns:
        The first candidate whose parse contains the chosen sub-analysis, or
        None when no rule applies.
    """
    candidates = lattice[index]
    key = candidates.abbreviated_key()
    chosen = select_case(key, RuleContext(index, lattice, previous))
    if chosen is None:
        return None
    for analysis in candidates:
        if chosen in analysis.transition_list:
            return analysis
    logger.debug(f"Rule for '{key}' chose '{chosen}', which no candidate contains")
    return None
