from SequenceSynthesis.assembler import SequenceAssembler
from SequenceSynthesis.sequence import Sequence
from SequenceSynthesis.strand import complement, complement_string


def test_complement_string_scenarios():
    assert complement_string("ATGC") == "TACG"
    assert complement_string("ATGCX") == "TACGN"
    assert complement_string("") == ""


def test_complement_of_sequence():
    seq = Sequence.from_string("ATGCX")
    assert complement(seq).to_string() == "TACGN"
    assert seq.to_string() == "ATGCX"


def test_lower_case_input_is_normalized():
    assert complement(Sequence.from_string("atgc")).to_string() == "TACG"


def test_double_complement_is_identity(config):
    seq = SequenceAssembler(config).generate()
    assert complement(complement(seq)) == seq


def test_annotations_carry_over(config):
    seq = SequenceAssembler(config).generate()
    comp = complement(seq)
    assert comp.regions == seq.regions
    for base, comp_base in zip(seq, comp):
        assert comp_base.position == base.position
        assert comp_base.region_index == base.region_index
        assert comp_base.coding == base.coding
        assert comp_base.chromatin_access == base.chromatin_access
        assert comp_base.symbol == {"A": "T", "T": "A", "G": "C", "C": "G"}[base.symbol]


def test_complement_does_not_share_regions(config):
    seq = SequenceAssembler(config).generate()
    comp = complement(seq)
    original_gc = seq.regions[0].gc_count
    assert comp.regions[0] is not seq.regions[0]
    comp.regions[0].gc_count = 999
    assert seq.regions[0].gc_count == original_gc
