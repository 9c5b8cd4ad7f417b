# geodash

A small side-scrolling arcade game built on pygame. The view scrolls to the
right on its own and the player's square is carried along with it. You make
it jump over spikes, land on platforms, pick up gifts for coins and reach the
exit door to move on to the next level. Coins you collect become money you
can spend in the store on new characters.

## Installing

```
pip install .
```

The game needs `pygame`, which is installed with it.

## Playing

Start the game from the directory that holds its resource files:

```
geodash
```

The command takes no options besides `--help`.

### Resource files

All files are looked up in the working directory.

- Levels: `level1.txt`, `level2.txt`, ...
- Images: `Background.png` (menu), `bg.png` (levels), `BackgroundStore.png`,
  `Start.png`, `Exit.png`, `Help.png`, `Store.png`, `Watch.png`,
  `GitHub.png`, `Done.png`, `Cancel.png`, `GeometryDashSpriteSheet.png`,
  `PlayerCharacters.png`, `Lock.png`.
- Font: `Athelas.ttc`.
- Sounds: `MenuSound.mp3`, `GameSound.mp3`, `click.mp3`, `unlock.wav`,
  `touchGift.wav`, `notification.wav`, `gameOver.wav`, `finishedLevel.wav`.

A missing image or font is reported on standard error and the game goes on
without it (pygame's default font replaces the missing one). A missing sound
file stops the game with `geodash.sound.SoundError`.

### Main menu

- **Start** – play the current level.
- **Exit** – quit the game. Closing the window in the menu does the same.
- **Help** – show the controls and tips; closing the window returns to the
  menu.
- **Store** – spend money on characters. Each one is shown with its price
  and a lock until it is bought. A successful purchase makes it the
  character used in the following levels. Clicking a character again buys it
  again at its full price. **Done** or **Cancel** returns to the menu.
- Two icon buttons in the bottom corners open a web page in your browser.
  Their default addresses are placeholders at `example.com`; pass `url=` to
  `geodash.buttons.Watch` or `geodash.buttons.GitHubLink` to change them.

### In a level

- Hold **Space** to jump.
- Touching a spike (`X`), or falling out of view, sends you back to the
  level's start.
- Platforms (`#`) can be stood on; hitting one from below or from the side
  stops you.
- Gifts (`G`) add a coin each and disappear.
- The exit door (`D`) ends the level.
- Closing the window during a level also ends it and returns to the menu.

When a level ends, however it ended, the coins collected in it are added to
your money and the next `Start` loads the next level file. If that file
cannot be read, an error is printed and the level is empty; close the window
to return to the menu.

## Level files

A level is a plain text file named `level<N>.txt`. Each character is one
50×50 cell, read left to right and top to bottom; a newline starts the next
row:

| Character | Object     |
|-----------|------------|
| `p`       | player     |
| `X`       | spike      |
| `#`       | platform   |
| `G`       | gift       |
| `D`       | exit door  |

Any other character, a space included, leaves its cell empty.

The same parsing is available from code: `geodash.game.parse_level(text,
images, player_type)` returns a list of moving objects and a list of static
objects. New symbols can be added with the `geodash.factory.register`
decorator and built with `geodash.factory.create`.

## What it does not do

- There are no enemies: `@` cells in a level file are left empty.
- Money, bought characters and the level reached are kept only while the
  game runs; nothing is saved between runs.
- Clicking does not jump; only Space does.

## Running the tests

```
pip install .[test]
pytest
```