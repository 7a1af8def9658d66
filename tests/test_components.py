import copy

from ultimatesim.components import (
    Belief,
    BeliefComponent,
    Identity,
    Job,
    JobComponent,
    LedgerComponent,
    Path,
    Position,
    SecretComponent,
    Trait,
    UnionComponent,
    UnionType,
)


def test_path_nodes_not_shared():
    a = Path()
    b = Path()
    a.nodes.append(Position(x=1.0, y=2.0))
    assert b.nodes == []
    assert a.has_path is False


def test_list_components_are_independent():
    for cls in (BeliefComponent, SecretComponent, LedgerComponent, UnionComponent):
        first = cls()
        second = cls()
        field_name = next(iter(vars(first)))
        if field_name == "union_type":
            field_name = "member_ids"
        getattr(first, field_name).append(7)
        assert getattr(second, field_name) == []


def test_deep_copy_is_equal_and_independent():
    original = BeliefComponent(beliefs=[Belief(belief_id=1, weight=10)])
    clone = copy.deepcopy(original)
    assert clone == original
    clone.beliefs[0].weight += 5
    assert original.beliefs[0].weight == 10


def test_default_job_is_unemployed():
    job = JobComponent()
    assert job.job_id == Job.NONE
    assert job.employer_id == 0


def test_trait_bits_are_distinct():
    ident = Identity(base_traits=Trait.CAUTIOUS)
    assert ident.base_traits & Trait.CAUTIOUS == Trait.CAUTIOUS
    assert ident.base_traits & Trait.RISK_TAKER == 0
    assert int(Trait.CAUTIOUS) & int(Trait.RISK_TAKER) == 0


def test_union_default_is_not_currency():
    assert UnionComponent().union_type != UnionType.CURRENCY
    assert UnionComponent(union_type=UnionType.CURRENCY).union_type == UnionType.CURRENCY