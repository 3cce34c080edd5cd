# pocketapps

A handful of small interactive terminal programs and a couple of reusable
pieces, bundled in one package. It has no third-party dependencies.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

All commands are interactive: they prompt on standard output and read
answers from standard input. Reaching the end of input ends the program
quietly.

### `pocketapps-wumpus`

Hunt the Wumpus. You are asked for a board width and height (each from 4 to
30) and whether to play in debug mode, which shows the letter of every
room's contents on the map.

- Move with `w`/`a`/`s`/`d` and fire an arrow with `f` (then pick a
  direction). Upper-case keys work too.
- You start with no arrows; pick them up in the cave. An arrow flies up to
  three rooms. If it misses, the Wumpus flees to a random empty room.
- Win by killing the Wumpus, or by picking up the gold and returning to the
  escape rope.
- You have three lives. Walking into the Wumpus costs one, and stalactites
  cost one half of the time. On losing a life, your gold and arrows are
  scattered around the cave and you restart at the escape rope.
- Bats leave you dazed, so your next move goes in a random direction.
- The Wumpus wanders to a free neighbouring room every turn. Neighbouring
  events give themselves away with a message.

Option: `--seed N` fixes the random layout and dice.

### `pocketapps-shootout`

A three-point shooting contest for any number of players. Each player
chooses a rack (1 to 5) for their money balls. Then they shoot five racks of
five balls plus two "starry" balls, each going in with even odds. Scoring:

- ordinary balls: 1 point
- money balls (the chosen rack, and the last ball of every rack): 2 points
- starry balls: 3 points

Each rack is printed with its score. The winner is announced, or a tie when
the best score was reached more than once. You can then play again.

### `pocketapps-coffee`

A coffee shop manager. It reads `shop_info.txt` (phone on the first line,
address on the second) and `menu.txt` from a directory. The directory is
the current one unless you pass `-d DIR` / `--directory DIR`. If either
file cannot be opened, it says so and stops.

`menu.txt` holds a count followed by, for each coffee, a one-word name and
the small, medium and large prices, all separated by whitespace.

The menu offers to:

1. view shop info (address, phone, revenue, menu and orders)
2. add a drink to the menu
3. remove a drink from the menu
4. search by coffee name
5. search by price (every size within a budget)
6. place an order (its price is added to the revenue)
7. log out

On logging out, the orders are written to `orders.txt` and the menu is saved
back to `menu.txt` in the same directory.

### `pocketapps-catalog`

A basketball team catalog. It asks for the name of a team file: a team
count, then for each team its name, owner, market value and number of
players, followed by each player's name, age, nationality, points per game
and field-goal rate, all separated by whitespace. You can then:

1. search teams by name
2. list each team's top scorer
3. find players by nationality
4. rank teams by total points per game
5. quit

Results are printed to the screen, or appended to a file you name.

## Library pieces

- `pocketapps.linked_list.LinkedList`: a singly linked list.
  - `push_front`, `push_back` and `insert(value, index)` add values.
  - `pop_front`, `pop_back` and `remove(index)` take them off. Each returns
    the removed value, or `None` when there is nothing at that place.
  - An out-of-range `insert` is ignored.
  - `sort_ascending` and `sort_descending` order the list by merge sort.
  - It also supports `len()`, iteration, `copy()` and `clear()`.
  - `str()` joins the values with spaces.
- `pocketapps.stairs.ways_to_top(n)`: counts the ways to climb `n` stairs
  using steps of 1, 2 or 3.
- `pocketapps.console.Console`: reads words, lines, integers and floats from
  a text stream and writes to another. All the commands use it for their
  input and output.

```python
from pocketapps.linked_list import LinkedList
from pocketapps.stairs import ways_to_top

items = LinkedList([5, 1, 7])
items.sort_descending()
print(items)          # 7 5 1
print(ways_to_top(5)) # 13
```

The game and shop logic can also be used without the prompts. See
`pocketapps.wumpus.game.Game` (with `take_turn`), `pocketapps.coffee.shop.Shop`
and the query functions in `pocketapps.catalog.catalog`.