"""The Entity aggregate: a combatant and the rules that mutate it.

An entity owns three components (inventory, outfit, battle commands) plus
base stats, hit points and gold. Every mutating method keeps these
invariants:

- gold is never negative;
- ``0 <= hp <= max_hp``;
- battle commands are sorted by name with no duplicates;
- an equipped unit is never also counted in the inventory;
- effective attack/defense/agility equal the base stat plus the deltas of
  everything in the outfit.

Methods take plain names (what a player typed) and return an ``Outcome``
instead of raising, because the dispatch layer feeds them raw user text.

Example:
    >>> from textquest.models import Entity, attack, weapon
    >>> hero = Entity(name="Hero")
    >>> _ = hero.add_item(weapon("Hammer", attack=3, command=attack("Bash")))
    >>> hero.equip_item("Hammer").ok
    True
    >>> hero.attack, hero.battle_commands.names
    (4, ['Bash'])
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from textquest.core.config import get_settings
from textquest.core.logging import get_logger
from textquest.engine.selection import Selector, get_default_selector
from textquest.models.commands import BattleCommand
from textquest.models.components import (
    BattleCommandSet,
    InventoryComponent,
    OutfitComponent,
    coerce_component_input,
)
from textquest.models.enums import EquipmentSlot, ItemKind
from textquest.models.items import Consumable, Equipment, Item
from textquest.models.outcome import Outcome, RewardHook, Rewards


logger = get_logger(__name__)


def _game_defaults() -> Any:
    return get_settings().game


class Entity(BaseModel):
    """A combatant: player, monster or NPC.

    Attributes:
        name: Display name; also the equality key.
        max_hp: Maximum hit points (>= 1).
        hp: Current hit points, defaults to max_hp and is clamped to it.
        base_attack: Attack before equipment.
        base_defense: Defense before equipment.
        base_agility: Agility before equipment.
        gold: Money held (>= 0).
        inventory: Carried item stacks.
        outfit: Equipped gear by slot.
        battle_commands: Actions available in combat.
        outfit_commands: Names in battle_commands that worn gear added and
            unequipping will take away again.
        on_rewards: Optional hook receiving reward reports.
    """

    model_config = ConfigDict(
        frozen=False,
        validate_assignment=True,
        extra="ignore",
    )

    name: str = Field(default_factory=lambda: _game_defaults().default_name, min_length=1)

    max_hp: int = Field(default_factory=lambda: _game_defaults().default_max_hp, ge=1)
    hp: int = Field(default=0, ge=0)
    base_attack: int = Field(default_factory=lambda: _game_defaults().default_attack, ge=0)
    base_defense: int = Field(default_factory=lambda: _game_defaults().default_defense, ge=0)
    base_agility: int = Field(default_factory=lambda: _game_defaults().default_agility, ge=0)
    gold: int = Field(default_factory=lambda: _game_defaults().default_gold, ge=0)

    inventory: InventoryComponent = Field(default_factory=InventoryComponent)
    outfit: OutfitComponent = Field(default_factory=OutfitComponent)
    battle_commands: BattleCommandSet = Field(default_factory=BattleCommandSet)
    outfit_commands: set[str] = Field(
        default_factory=set,
        description="Battle commands present only because worn gear grants them",
    )

    on_rewards: RewardHook | None = Field(default=None, exclude=True, repr=False)

    @model_validator(mode="before")
    @classmethod
    def default_and_clamp_hp(cls, data: Any) -> Any:
        """Start at full health unless told otherwise; never above max_hp."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        max_hp = data.get("max_hp")
        if max_hp is None:
            max_hp = _game_defaults().default_max_hp
        hp = data.get("hp")
        if hp is None:
            data["hp"] = max_hp
        elif isinstance(hp, int) and isinstance(max_hp, int) and hp > max_hp:
            data["hp"] = max_hp
        return data

    @field_validator("inventory", mode="before")
    @classmethod
    def coerce_inventory(cls, v: Any) -> Any:
        return coerce_component_input(v, "stacks")

    @field_validator("outfit", mode="before")
    @classmethod
    def coerce_outfit(cls, v: Any) -> Any:
        return coerce_component_input(v, "slots")

    @field_validator("battle_commands", mode="before")
    @classmethod
    def coerce_battle_commands(cls, v: Any) -> Any:
        return coerce_component_input(v, "commands")

    def model_post_init(self, __context: Any) -> None:
        """Commands granted by gear worn from the start are available at once.

        Runs once per construction; field assignment does not repeat it.
        """
        for command in self.outfit.granted_commands():
            if self.battle_commands.add(command):
                self.outfit_commands.add(command.name)

    # Mutable and compared by name, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.name == other.name

    # =========================================================================
    # Effective stats
    # =========================================================================

    @computed_field(description="Base attack plus equipment")
    @property
    def attack(self) -> int:
        return self.base_attack + self.outfit.total_stat_change().attack

    @computed_field(description="Base defense plus equipment")
    @property
    def defense(self) -> int:
        return self.base_defense + self.outfit.total_stat_change().defense

    @computed_field(description="Base agility plus equipment")
    @property
    def agility(self) -> int:
        return self.base_agility + self.outfit.total_stat_change().agility

    @computed_field(description="Whether hp is above zero")
    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    # =========================================================================
    # Hit points
    # =========================================================================

    def heal(self, amount: int) -> int:
        """Restore up to ``amount`` hp, capped at max_hp. Returns hp restored."""
        if amount <= 0:
            return 0
        before = self.hp
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp - before

    def take_damage(self, amount: int) -> int:
        """Lose up to ``amount`` hp, floored at 0. Returns hp lost."""
        if amount <= 0:
            return 0
        before = self.hp
        self.hp = max(0, self.hp - amount)
        return before - self.hp

    # =========================================================================
    # Inventory
    # =========================================================================

    def add_item(self, item: Item, quantity: int = 1) -> Outcome:
        """Add ``quantity`` copies, merging into an existing stack."""
        if not self.inventory.add(item, quantity):
            return Outcome.noop()
        logger.debug("Item added", entity=self.name, item=item.name, quantity=quantity)
        return Outcome.applied()

    def remove_item(self, name: str, quantity: int = 1) -> Outcome:
        """Remove up to ``quantity`` copies of ``name``; over-removal empties the stack."""
        removed = self.inventory.remove(name, quantity)
        if removed == 0:
            return Outcome.noop()
        logger.debug("Item removed", entity=self.name, item=name, quantity=removed)
        return Outcome.applied()

    def has_item(self, name: str) -> int | None:
        """Index of the stack holding ``name``, or None."""
        return self.inventory.index_of(name)

    def find_item(self, item: Item) -> int | None:
        """Index of the stack holding ``item``, or None."""
        return self.inventory.index_of(item.name)

    def clear_inventory(self) -> None:
        self.inventory.clear()

    def drop_item(self, name: str) -> Outcome:
        """Throw away one copy of ``name`` unless it is not disposable."""
        stack = self.inventory.get(name)
        if stack is None:
            return Outcome.noop("You can't drop what you don't have!")
        if not stack.item.disposable:
            return Outcome.rejected("You cannot drop that item.")
        self.inventory.remove(name, 1)
        logger.debug("Item dropped", entity=self.name, item=name)
        return Outcome.applied(f"You have dropped {name}.")

    # =========================================================================
    # Equipment
    # =========================================================================

    def _transfer_to_outfit(self, equipment: Equipment) -> None:
        """Move one unit of ``equipment`` from the inventory into its empty slot."""
        self.inventory.remove(equipment.name, 1)
        self.outfit.put(equipment)
        command = equipment.granted_command
        if command is not None and self.battle_commands.add(command):
            self.outfit_commands.add(command.name)

    def _transfer_to_inventory(self, slot: EquipmentSlot) -> Equipment | None:
        """Move whatever occupies ``slot`` back into the inventory.

        A granted command is taken away only if the outfit added it and no
        other worn item grants it too.
        """
        equipment = self.outfit.take(slot)
        if equipment is None:
            return None
        command = equipment.granted_command
        if (
            command is not None
            and command.name in self.outfit_commands
            and all(other.name != command.name for other in self.outfit.granted_commands())
        ):
            self.outfit_commands.discard(command.name)
            self.battle_commands.remove(command.name)
        self.inventory.add(equipment, 1)
        return equipment

    def equip_item(self, name: str) -> Outcome:
        """Equip one copy of ``name`` from the inventory.

        Whatever already occupies the target slot goes back into the
        inventory first.

        Returns:
            NOOP if the item is not carried, REJECTED if it is not
            equipment, APPLIED otherwise.
        """
        stack = self.inventory.get(name)
        if stack is None:
            return Outcome.noop(f"You don't have {name}!")

        item = stack.item
        if item.kind != ItemKind.EQUIPMENT or not isinstance(item, Equipment):
            logger.info("Equip rejected", entity=self.name, item=name, kind=str(item.kind))
            return Outcome.rejected(f"{name} cannot be equipped!")

        replaced = self._transfer_to_inventory(item.slot)
        self._transfer_to_outfit(item)

        logger.debug(
            "Item equipped",
            entity=self.name,
            item=item.name,
            slot=str(item.slot),
            replaced=replaced.name if replaced else None,
        )
        return Outcome.applied(f"{self.name} equips {item.name}!")

    def unequip_item(self, name: str) -> Outcome:
        """Return the equipped item called ``name`` to the inventory.

        Unequipping something not worn is a no-op.
        """
        slot = self.outfit.slot_of(name)
        if slot is None:
            return Outcome.noop(f"You are not equipping {name}!")
        self._transfer_to_inventory(slot)
        logger.debug("Item unequipped", entity=self.name, item=name, slot=str(slot))
        return Outcome.applied(f"{self.name} unequips {name}!")

    # =========================================================================
    # Battle commands
    # =========================================================================

    def add_battle_command(self, command: BattleCommand) -> Outcome:
        """Learn ``command``; a same-named command from gear becomes permanent."""
        self.outfit_commands.discard(command.name)
        if not self.battle_commands.add(command):
            return Outcome.noop()
        return Outcome.applied()

    def remove_battle_command(self, name: str) -> Outcome:
        self.outfit_commands.discard(name)
        if not self.battle_commands.remove(name):
            return Outcome.noop()
        return Outcome.applied()

    def has_battle_command(self, name: str) -> int | None:
        """Index of the command called ``name``, or None."""
        return self.battle_commands.index_of(name)

    # =========================================================================
    # Gold and rewards
    # =========================================================================

    def add_gold(self, amount: int) -> Outcome:
        """Gain ``amount`` gold. Negative amounts are ignored; use remove_gold."""
        if amount < 0:
            return Outcome.noop()
        self.gold += amount
        return Outcome.applied()

    def remove_gold(self, amount: int) -> Outcome:
        """Lose ``amount`` gold, stopping at zero."""
        self.gold = max(0, self.gold - amount)
        return Outcome.applied()

    def set_gold(self, amount: int) -> Outcome:
        self.gold = max(0, amount)
        return Outcome.applied()

    def add_rewards(
        self,
        gold: int,
        item: Item | None = None,
        *,
        hook: RewardHook | None = None,
    ) -> Outcome:
        """Grant gold and an optional treasure item, then report them.

        The report goes to ``hook``, else to ``on_rewards``, else to the log.
        Nothing is reported when there is no reward.

        Returns:
            NOOP for an empty reward, otherwise APPLIED with the report text.
        """
        gold = max(0, gold)
        rewards = Rewards(gold=gold, item=item)
        if rewards.is_empty:
            return Outcome.noop()

        self.add_gold(gold)
        if item is not None:
            self.inventory.add(item, 1)

        summary = rewards.summary()
        if get_settings().game.report_rewards:
            report = hook or self.on_rewards
            if report is not None:
                report(rewards)
            else:
                logger.info(
                    "Rewards granted",
                    entity=self.name,
                    gold=gold,
                    item=item.name if item else None,
                )
        return Outcome.applied(summary)

    # =========================================================================
    # Item use
    # =========================================================================

    def use_item(self, name: str, target: Entity) -> Outcome:
        """Use one copy of ``name`` from this entity's inventory on ``target``.

        The user's inventory is debited; the effect lands on the target,
        which may be the user.
        """
        stack = self.inventory.get(name)
        if stack is None:
            return Outcome.noop(f"You don't have {name}!")

        item = stack.item
        if item.kind != ItemKind.CONSUMABLE or not isinstance(item, Consumable):
            logger.info("Use rejected", entity=self.name, item=name, kind=str(item.kind))
            return Outcome.rejected(f"{name} cannot be used!")

        restored = item.apply_to(target)
        self.inventory.remove(name, 1)
        logger.debug(
            "Item used",
            entity=self.name,
            item=name,
            target=target.name,
            restored=restored,
        )
        if target is self:
            return Outcome.applied(f"{self.name} uses {name} and recovers {restored} HP!")
        return Outcome.applied(
            f"{self.name} uses {name} on {target.name}, who recovers {restored} HP!"
        )

    # =========================================================================
    # Combat selection
    # =========================================================================

    def choose_attack(self, selector: Selector | None = None) -> BattleCommand | None:
        """Pick a battle command at random; None when there are none."""
        selector = selector or get_default_selector()
        return selector.choice(self.battle_commands.commands)

    def choose_item_and_on_whom(
        self,
        opponent: Entity,
        selector: Selector | None = None,
    ) -> tuple[Item, Entity] | None:
        """Pick a carried item and a target (self or ``opponent``) at random.

        Returns:
            The (item, target) pair, or None when the inventory is empty.
        """
        selector = selector or get_default_selector()
        picked = selector.pair(self.inventory.stacks, [self, opponent])
        if picked is None:
            return None
        stack, target = picked
        return stack.item, target


__all__ = ["Entity"]
