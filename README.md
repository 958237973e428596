# chimielab

Chemistry practice for seventh-grade pupils, with all texts in Romanian.

- **Solved problems** (`chimielab.problems`): percent concentration, molar
  concentration, the mass of a solution and the mass of dissolved NaCl, each
  with a step-by-step explanation. `check_percent_answer` checks a written
  solution to the guided exercise "60 g NaCl in 150 g of solution".
- **Periodic table** (`chimielab.periodic`): the 18-column layout
  (`table_cells`), the colour of each element family (`element_color`), and
  element details read from a `|`-separated data file (`load_elements`,
  `parse_elements`, `element_message`).
- **Games**, as classes driven by your own code:
  - `chimielab.atom_game.AtomQuiz`: give protons, electrons and neutrons for a
    random atomic number Z;
  - `chimielab.molecule.MoleculeBuilder`: place atoms, bond close neighbours,
    score when the target formula is built;
  - `chimielab.memory.MemoryGame`: match substances with their state of
    matter;
  - `chimielab.separation.SeparationQuiz`: pick the method that separates a
    mixture;
  - `chimielab.lab`: tool descriptions (`describe_tool`) and a `SortingBoard`
    on which tools are dropped into category zones.
- **Learning statistics** (`chimielab.stats`): study sessions, a time summary
  and grade history stored in a MariaDB/MySQL database.
- **Menus** (`chimielab.menus`): menu definitions, `center_column` for laying
  out a column of buttons, and `manual_path` to locate the PDF manual.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Command line

Run without arguments, `chimielab` prints the main menu. Each menu entry shows,
in brackets, the command that leads to it.

```
chimielab                              # main menu
chimielab menu concentratie            # also: main, exercitii, jocuri

chimielab molar 2 4                    # molar concentration, worked out
chimielab solution-mass 30 15          # mass of a solution (add --brief)
chimielab solute-mass 0.5 2            # mass of NaCl from Cm and V
chimielab check-percent "60/150*100=40%"
chimielab check-percent --show         # show the worked solution

chimielab table                        # the periodic table grid
chimielab element Na --data elemente.txt
chimielab manual --dir .               # path of Manual-Chimie-cl-7.pdf

chimielab atom --seed 1                # atom structure quiz (reads stdin)
chimielab separation --seed 1          # separation of mixtures (reads stdin)

chimielab dashboard ana --host localhost --port 3306 --database chimie_db
chimielab grades ana
```

- `check-percent` exits with status 2 when the answer is wrong.
- In `atom`, type three numbers (protons electrons neutrons), `nou` for a new
  atom or `ajutor` for a hint. In `separation`, type an option's number or
  the method's name. An empty line, `q`, `iesire` or `ieșire` ends a game.
- The element data file holds one element per line:
  `symbol|name|atomic number|atomic mass|description`. Lines with fewer than
  five fields are skipped. `--data` defaults to `elemente.txt` in the current
  directory.
- `--user NAME --record`, given before the command, stores how long the
  command ran as a study session, for example
  `chimielab --user ana --record table`.
- Invalid numbers, missing files and unknown elements are reported on stderr
  with exit status 1.

## Using it as a library

```python
from chimielab.problems import molar_concentration, explain_molar_concentration
from chimielab.problems import check_percent_answer

cm = molar_concentration(2, 4)           # 0.5 mol/L; raises ValueError if volume <= 0
print(explain_molar_concentration(2, 4))

check_percent_answer("c% = 60/150 * 100 = 40%")  # True
```

Molecule formulas list the symbols in alphabetical order, each followed by its
count when above one:

```python
from chimielab.molecule import formula_of, molecule_name

formula = formula_of(["H", "O", "H"])    # "H2O"
molecule_name(formula)                   # "Apă"
```

The statistics read and write through any DB-API connection. `connect` opens
one with PyMySQL:

```python
from chimielab.stats import connect, LearningStore

password = "password"
conn = connect(host="localhost", port=3306, user="root",
               password=password, database="chimie_db")
store = LearningStore(conn, "%s")
print(store.summary_text("ana"))
print(store.grades_for_test("ana", "Test1"))
```

## What it does not do

- There are no graphical windows. Everything is either a library call or a
  text command.
- There is no login or registration. The user name is passed as an argument.
- The molecule builder, the memory game and the lab sorting board have no
  command. They are available only as classes.
- The solution-volume problem has no command; its menu entry shows none.
- Grades are only read. There are no tests to take, so nothing writes to
  `rezultate_teste`.
- The tables `sesiuni_invatare` and `rezultate_teste` are not created by the
  package; they must already exist in the database.
- The database commands connect as `root` with an empty password. Only the
  host, port and database can be changed on the command line.
- `manual` prints the path of the PDF manual but does not open it.

## Running the tests

```
pytest
```