from src.pokemon_adventure import party
from src.pokemon_adventure.data.items import SHOP_ITEMS
from src.pokemon_adventure.enums import ActionResult, ItemKind, Species
from src.pokemon_adventure.inventory import purchase, use_potion
from src.pokemon_adventure.schema.player import Inventory, Player
from src.pokemon_adventure.utils.mon_factory import create_creature


def make_player(*party_members) -> Player:
    members = list(party_members) or [create_creature(Species.PIKACHU, level=5)]
    return Player(x=0, y=0, party=members, inventory=Inventory(money=500, pokeballs=1, potions=1))


def test_shop_prices():
    assert SHOP_ITEMS[ItemKind.POKEBALL].price == 200
    assert SHOP_ITEMS[ItemKind.POTION].price == 300


def test_purchase_deducts_and_increments():
    bag = Inventory(money=800, pokeballs=0, potions=0)
    assert purchase(bag, ItemKind.POKEBALL) == ActionResult.OK
    assert bag == Inventory(money=600, pokeballs=1, potions=0)
    assert purchase(bag, ItemKind.POTION) == ActionResult.OK
    assert bag == Inventory(money=300, pokeballs=1, potions=1)
    assert purchase(bag, ItemKind.POTION) == ActionResult.OK
    assert bag == Inventory(money=0, pokeballs=1, potions=2)
    assert purchase(bag, ItemKind.POKEBALL) == ActionResult.INSUFFICIENT_FUNDS
    assert bag == Inventory(money=0, pokeballs=1, potions=2)


def test_purchase_refused_when_short_of_price():
    bag = Inventory(money=400, pokeballs=0, potions=0)
    assert purchase(bag, ItemKind.POKEBALL) == ActionResult.OK
    assert purchase(bag, ItemKind.POTION) == ActionResult.INSUFFICIENT_FUNDS
    assert bag == Inventory(money=200, pokeballs=1, potions=0)
    assert purchase(bag, ItemKind.POKEBALL) == ActionResult.OK
    assert bag == Inventory(money=0, pokeballs=2, potions=0)


def test_unknown_item_is_refused():
    bag = Inventory(money=500)
    assert purchase(bag, 42) == ActionResult.UNKNOWN_ITEM
    assert bag.money == 500


def test_potion_with_empty_bag_changes_nothing():
    mon = create_creature(Species.SQUIRTLE, level=5)
    mon.hp = 10
    bag = Inventory(money=0, pokeballs=0, potions=0)
    assert use_potion(bag, mon) == ActionResult.NO_POTIONS
    assert mon.hp == 10
    assert bag.potions == 0


def test_potion_on_full_hp_is_refused():
    mon = create_creature(Species.SQUIRTLE, level=5)
    bag = Inventory(potions=3)
    assert use_potion(bag, mon) == ActionResult.ALREADY_FULL_HP
    assert bag.potions == 3


def test_potion_heals_twenty_capped_at_max():
    mon = create_creature(Species.SQUIRTLE, level=5)
    bag = Inventory(potions=2)
    mon.hp = mon.maxHP - 30
    assert use_potion(bag, mon) == ActionResult.OK
    assert mon.hp == mon.maxHP - 10
    assert use_potion(bag, mon) == ActionResult.OK
    assert mon.hp == mon.maxHP
    assert bag.potions == 0


def test_potion_revives_fainted_creature():
    mon = create_creature(Species.PIDGEY, level=5)
    mon.hp = 0
    bag = Inventory(potions=1)
    assert use_potion(bag, mon, heal_amount=20) == ActionResult.OK
    assert mon.hp == 20
    assert not mon.is_fainted()


def test_set_active_refuses_fainted_and_missing():
    healthy = create_creature(Species.PIKACHU, level=5)
    fainted = create_creature(Species.RATTATA, level=5)
    fainted.hp = 0
    spare = create_creature(Species.BULBASAUR, level=5)
    player = make_player(healthy, fainted, spare)

    assert party.set_active(player, 1) == ActionResult.INVALID_TARGET
    assert party.set_active(player, 3) == ActionResult.INVALID_TARGET
    assert party.set_active(player, -1) == ActionResult.INVALID_TARGET
    assert player.active_index == 0
    assert party.set_active(player, 2) == ActionResult.OK
    assert player.active_index == 2


def test_add_captured_joins_at_full_hp_in_capture_order():
    player = make_player()
    wild = create_creature(Species.CHARMANDER, level=4)
    wild.hp = 1
    member = party.add_captured(player, wild)
    assert player.party[-1] is member
    assert member.hp == member.maxHP
    assert member.id == wild.id
    assert [mon.species for mon in player.party] == [Species.PIKACHU, Species.CHARMANDER]


def test_next_healthy_index():
    a = create_creature(Species.PIKACHU, level=5)
    b = create_creature(Species.RATTATA, level=5)
    c = create_creature(Species.PIDGEY, level=5)
    player = make_player(a, b, c)
    assert party.next_healthy_index(player, exclude=0) == 1
    b.hp = 0
    assert party.next_healthy_index(player, exclude=0) == 2
    c.hp = 0
    assert party.next_healthy_index(player, exclude=0) is None
    assert party.has_healthy(player)
    a.hp = 0
    assert not party.has_healthy(player)
