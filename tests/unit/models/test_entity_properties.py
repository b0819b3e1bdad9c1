"""Property-based tests for Entity invariants."""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from textquest.models import Entity, EquipmentSlot, Item, attack, helmet, legs, shield, torso, weapon


item_names = st.sampled_from(["Apple", "Banana", "Rock", "Key", "Rope"])
quantities = st.integers(min_value=1, max_value=50)
command_names = st.text(alphabet="abcdefghKLMNOP", min_size=1, max_size=6)

_FACTORIES = {
    EquipmentSlot.WEAPON: weapon,
    EquipmentSlot.SHIELD: shield,
    EquipmentSlot.HELMET: helmet,
    EquipmentSlot.TORSO: torso,
    EquipmentSlot.LEGS: legs,
}

deltas = st.integers(min_value=-5, max_value=10)
granted_names = st.sampled_from(["Bash", "Slash", "Stab", "Zap"])

# The autouse fixture only clears caches between tests.
FIXTURE_SAFE = [HealthCheck.function_scoped_fixture]


@st.composite
def equipment_items(draw):
    slot = draw(st.sampled_from(list(EquipmentSlot)))
    name = f"{slot.display_name} {draw(st.integers(min_value=0, max_value=3))}"
    command = draw(st.none() | granted_names.map(attack))
    command_key = "command" if slot == EquipmentSlot.WEAPON else "granted_command"
    return _FACTORIES[slot](
        name,
        attack=draw(deltas),
        defense=draw(deltas),
        agility=draw(deltas),
        **{command_key: command},
    )


def _assert_effective_stats(entity: Entity) -> None:
    worn = list(entity.outfit.slots.values())
    assert entity.attack == entity.base_attack + sum(e.stat_change.attack for e in worn)
    assert entity.defense == entity.base_defense + sum(e.stat_change.defense for e in worn)
    assert entity.agility == entity.base_agility + sum(e.stat_change.agility for e in worn)


class TestInventoryProperties:
    """Stacking laws."""

    @given(name=item_names, a=quantities, b=quantities)
    @settings(max_examples=50, deadline=None, suppress_health_check=FIXTURE_SAFE)
    def test_adding_twice_merges(self, name: str, a: int, b: int) -> None:
        """Adding a then b copies leaves a single stack of a + b."""
        entity = Entity()
        entity.add_item(Item(name=name), a)
        entity.add_item(Item(name=name), b)

        assert len(entity.inventory.stacks) == 1
        assert entity.inventory.quantity_of(name) == a + b

    @given(
        adds=st.lists(st.tuples(item_names, quantities), min_size=1, max_size=10),
        victim=item_names,
        amount=quantities,
    )
    @settings(max_examples=50, deadline=None, suppress_health_check=FIXTURE_SAFE)
    def test_removal_preserves_order(
        self, adds: list[tuple[str, int]], victim: str, amount: int
    ) -> None:
        """Removing from one stack leaves the others in order, with no gaps."""
        entity = Entity()
        for name, qty in adds:
            entity.add_item(Item(name=name), qty)
        before = [stack.name for stack in entity.inventory.stacks]

        entity.remove_item(victim, amount)

        after = [stack.name for stack in entity.inventory.stacks]
        assert after == [name for name in before if name in after]
        assert all(stack.quantity >= 1 for stack in entity.inventory.stacks)
        assert len(set(after)) == len(after)


class TestBattleCommandProperties:
    """Ordering laws."""

    @given(names=st.lists(command_names, max_size=15))
    @settings(max_examples=50, deadline=None, suppress_health_check=FIXTURE_SAFE)
    def test_commands_sorted_and_unique(self, names: list[str]) -> None:
        """Any sequence of additions yields sorted, duplicate-free names."""
        entity = Entity()
        for name in names:
            entity.add_battle_command(attack(name))

        assert entity.battle_commands.names == sorted(set(names))

    @given(initial=st.lists(command_names, max_size=10))
    @settings(max_examples=30, deadline=None, suppress_health_check=FIXTURE_SAFE)
    def test_construction_sorts_and_deduplicates(self, initial: list[str]) -> None:
        """Initial commands are normalised on construction."""
        entity = Entity(battle_commands=[attack(name) for name in initial])

        assert entity.battle_commands.names == sorted(set(initial))


class TestGoldProperties:
    """Gold never goes negative."""

    @given(
        start=st.integers(min_value=0, max_value=1000),
        ops=st.lists(
            st.tuples(
                st.sampled_from(["add", "remove", "set"]),
                st.integers(min_value=-500, max_value=500),
            ),
            max_size=20,
        ),
    )
    @settings(max_examples=100, deadline=None, suppress_health_check=FIXTURE_SAFE)
    def test_gold_non_negative(self, start: int, ops: list[tuple[str, int]]) -> None:
        entity = Entity(gold=start)
        for op, amount in ops:
            getattr(entity, f"{op}_gold")(amount)
            assert entity.gold >= 0


class TestEquipmentProperties:
    """Equip/unequip laws."""

    @given(
        equipment=equipment_items(),
        base=st.integers(min_value=0, max_value=20),
        known=st.lists(granted_names, max_size=3),
        extras=st.lists(st.tuples(item_names, quantities), max_size=4),
        copies=st.integers(min_value=1, max_value=3),
    )
    @settings(max_examples=100, deadline=None, suppress_health_check=FIXTURE_SAFE)
    def test_round_trip_restores_state(
        self,
        equipment,
        base: int,
        known: list[str],
        extras: list[tuple[str, int]],
        copies: int,
    ) -> None:
        """Equipping then unequipping into an empty slot changes nothing."""
        entity = Entity(
            base_attack=base,
            base_defense=base,
            base_agility=base,
            battle_commands=[attack(name) for name in known],
        )
        for name, qty in extras:
            entity.add_item(Item(name=name), qty)
        entity.add_item(equipment, copies)
        stats = (entity.attack, entity.defense, entity.agility)
        commands = entity.battle_commands.names
        stacks = sorted((stack.name, stack.quantity) for stack in entity.inventory.stacks)

        entity.equip_item(equipment.name)
        entity.unequip_item(equipment.name)

        assert (entity.attack, entity.defense, entity.agility) == stats
        assert entity.battle_commands.names == commands
        assert sorted((stack.name, stack.quantity) for stack in entity.inventory.stacks) == stacks
        assert entity.outfit.is_empty
        assert entity.outfit_commands == set()

    @given(
        pieces=st.lists(equipment_items(), min_size=1, max_size=8),
        actions=st.lists(
            st.tuples(st.booleans(), st.integers(min_value=0, max_value=7)),
            max_size=25,
        ),
    )
    @settings(max_examples=50, deadline=None, suppress_health_check=FIXTURE_SAFE)
    def test_effective_stats_track_outfit(self, pieces, actions) -> None:
        """Stats and commands follow whatever is worn after any sequence."""
        entity = Entity(base_attack=10, base_defense=10, base_agility=10)
        for piece in pieces:
            entity.add_item(piece)
        total = sum(stack.quantity for stack in entity.inventory.stacks)

        for equip, index in actions:
            name = pieces[index % len(pieces)].name
            if equip:
                entity.equip_item(name)
            else:
                entity.unequip_item(name)

            _assert_effective_stats(entity)
            granted = {command.name for command in entity.outfit.granted_commands()}
            assert set(entity.battle_commands.names) == granted
            carried = sum(stack.quantity for stack in entity.inventory.stacks)
            assert carried + len(entity.outfit.slots) == total
