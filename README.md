# labkit

A set of small command-line programs and the library functions behind
them. Each program lives in its own module of the `labkit` package and can
be run from the shell or imported.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

Runtime dependencies are `psutil` (system details) and `pymongo` (people
records). `labkit-sysdetails users` relies on the `pwd` module and so works
on POSIX systems only.

## Programs

### Game of Life: `labkit-life`

Conway's Game of Life on a 75 × 75 grid. Only the first 74 rows and
columns are updated, counted and drawn. Each generation clears the screen,
draws live cells as red `*` and prints the population.

```
labkit-life                                  # random starting world
labkit-life cells.txt                        # "row column" pairs, one per line
labkit-life --generations 20 --delay 0.5     # defaults: 100 generations, 2 s apart
```

From Python, `labkit.life` offers `empty_world()`, `random_world(rng)`,
`census(world)`, `generation(world)`, `populate_from_file(path)` and
`render(world)`. `populate_from_file` raises `ValueError` for malformed
lines or coordinates outside the grid.

### DVD records: `labkit-dvd`

Decodes a sample DVD record, prints it as compact JSON, appends that JSON
to a file (default `file.json`, which must already exist) and reads it back.

```
labkit-dvd [file]
```

`labkit.dvd.Dvd` is a frozen dataclass with `to_json()` and
`Dvd.from_json(raw)`; the latter checks the field types and that `year`
and `length` fit in 0–65535, raising `ValueError` otherwise.
`append_to_file(path, dvd)` and `read_from_file(path)` handle files;
`read_from_file` expects exactly one JSON object.

### Hangman: `labkit-hangman`

Picks a word longer than four characters from a word list (default
`words.txt`; the first word of the list is never chosen) and reads one guess
per line from standard input. Ten wrong guesses complete the figure.

```
labkit-hangman [words-file]
```

`labkit.hangman` provides `Word` (with `check_for_letter(letter)` and
`is_complete()`), `read_word_list(path)`, `select_word(words, rng)` and
`play(word, guesses, output)`.

### Recursion: `labkit-recurse`

Prints `5!`, the fifth Fibonacci number and the moves of a four-disk Tower
of Hanoi. `labkit.recurse` provides `factorial(n)`, `fibonacci(n)` (both
raise `OverflowError` past 128 unsigned bits and `ValueError` for negative
`n`) and `tower_moves(n, source, target, spare)`, a generator of
`(disk, from_rod, to_rod)` tuples.

### Movies: `labkit-movie-sort`, `labkit-movie-tree`

`labkit-movie-sort` prints a built-in list of films from newest to oldest.
`labkit-movie-tree` reads tab-separated `title<TAB>year` lines (default
`values.txt`), reports how many there are, looks up "Captain America" and
"Boys Night Out", and prints the collection alphabetically and then by year.

```
labkit-movie-sort
labkit-movie-tree [file]
```

From Python: `Movie`, `default_movies()`, `by_year_descending(movies)`,
`load_movie_years(path)` and `sorted_by_year(movie_years)` in
`labkit.movies`.

### Temperatures: `labkit-temperatures`

Reads `minimum,maximum` lines (default `temperatures.txt`) and prints the
average daily low and high, computed in single precision.

```
labkit-temperatures [file]
```

`labkit.temperatures` provides `Temperature`, `read_temperatures(path)` and
`average(temps)`; an empty list averages to NaN.

### Chat bot: `labkit-chat`

Loads tab-separated `key<TAB>response` lines (default `chatresponses.txt`),
greets you and answers each line of standard input with the first response
whose key occurs in it, until the input ends.

```
labkit-chat [file]
```

`labkit.chat` provides `ChatResponse`, `load_responses(path)`,
`reply(responses, query)` and `converse(responses, lines, output)`.

### File hashing: `labkit-filehash`

Prints `path : sha256` for every entry of a directory (default: the
current one) that is not itself a directory. File contents must be valid
UTF-8; otherwise a `UnicodeDecodeError` is raised.

```
labkit-filehash [directory]
```

`labkit.filehash.hash_files(directory)` returns the `(path, digest)` pairs.

### File server and client: `labkit-fileserver`, `labkit-fileclient`

The server listens on `0.0.0.0:3333` by default, sends a `> ` prompt to each
connection, answers one request and closes it. It understands `flist`
(concatenated paths of the current directory's entries) and `md <path>`
(create a directory and its parents); anything else gets
`Unacceptable command`.

```
labkit-fileserver --host 127.0.0.1 --port 3333
labkit-fileclient localhost:3333
```

The client prints the server's greeting and then sends only lines that
start with `flist` or `md`; `exit` (in any letter case) ends the session.

From Python: `make_directory(path)`, `file_listing(directory)`,
`handle_command(request, directory)` and `serve(host, port)` in
`labkit.fileserver`; `validate_input(line)`, `is_exit(line)` and
`run_session(sock, lines, output)` in `labkit.fileclient`.

### Findings database: `labkit-findings`

Keeps findings (title, finding, details, justification) in an SQLite file,
`stratapp.db` by default.

```
labkit-findings add            # prompts for each field on standard input
labkit-findings list
labkit-findings list --db other.db
```

`labkit.findings.FindingsDB` is a context manager with `add(finding)`,
`records()` and `close()`; `format_finding(finding)` renders one entry.

### TLS fetch: `labkit-tlsfetch`

Opens a TLS connection, sends a bare `GET /` request and prints the raw
response, read until the server closes the connection.

```
labkit-tlsfetch --host www.example.com --server-name www.example.com
labkit-tlsfetch --bare-newlines        # use "\n" instead of "\r\n"
```

Defaults are host `www.google.com`, port 443 and server name `google.com`.
`build_request(host, line_ending)` and
`fetch(host, port, server_name, request)` are in `labkit.tlsfetch`.

### HTTP client: `labkit-http`

Fetches the URL given as the last argument and prints the response headers.

```
labkit-http -w -p https://www.example.com/
```

`-w` writes the body to `resp-output.txt`; `-p` prints the body with HTML
tags and comments removed and blank-line pairs dropped.
`labkit.httpclient` provides `parse_args(argv)`, `strip_tags(text)`,
`clean_for_screen(body)` and `fetch(url)`.

### Web servers: `labkit-webapp`

Two small plain-HTTP servers, bound to `127.0.0.1` by default.

```
labkit-webapp greetz [--port 8000]
labkit-webapp hello [--port 8080]
```

`greetz` (the default) serves `GET /`, `GET /bacon` (contents of
`bacon.txt`), `GET /greetz/<name>/<age>`, `GET /ofage/<name>/<age>` (ages
0–255) and `POST /upload`, which stores the request body in
`/tmp/data.txt`. `hello` reads `bacon.txt` at start-up and serves
`GET /bacon`, `GET /hello/you` and `GET /bye/<name>`. Unknown routes get 404.

From Python: `greeting(name, age)`, `age_check(name, age)`,
`respond(method, path, body, bacon_path, upload_path)`,
`hello_respond(path, bacon_text)` and `serve(host, port, responder)` in
`labkit.webapp`.

### System details: `labkit-sysdetails`

Prints the boot time (as seconds since the epoch) and the current process
id, then one report:

```
labkit-sysdetails disks
labkit-sysdetails memory
labkit-sysdetails process
labkit-sysdetails users
```

The reports come from `memory_lines()`, `disk_lines()`, `process_lines()`
and `user_lines()` in `labkit.sysdetails`.

### People in MongoDB: `labkit-people-load`, `labkit-people-lookup`

`labkit-people-load` reads JSON objects written one after another (default
`people.json`) and inserts each into the `customer_info.people` collection,
printing each inserted id or the reason an insert failed.
`labkit-people-lookup` reads a name from standard input and prints the
location of every matching person.

```
labkit-people-load [file] [--uri mongodb://localhost:27017]
labkit-people-lookup [--uri mongodb://localhost:27017]
```

`labkit.people` provides `Person`, `read_people(path)`,
`insert_people(collection, people)` and `lookup_locations(collection, name)`.

## What is not included

- There is no TLS server; `labkit-tlsfetch` is client-side only, and the web
  and file servers speak plain, unencrypted protocols.
- The findings database, file server and web servers have no
  authentication or access control.