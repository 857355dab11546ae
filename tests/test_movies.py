import pytest

from labkit.movies import (
    Movie,
    by_year_descending,
    default_movies,
    load_movie_years,
    main_sort,
    main_tree,
    sorted_by_year,
)


def test_default_movies_descending():
    ordered = by_year_descending(default_movies())
    years = [movie.year for movie in ordered]
    assert years == sorted(years, reverse=True)
    assert ordered[0] == Movie("Captain America", 2011)
    assert ordered[-1] == Movie("Boys Night Out", 1962)
    assert sorted(ordered) == sorted(default_movies())


def test_same_year_comes_out_reversed():
    first, second = Movie("first", 2000), Movie("second", 2000)
    assert by_year_descending([first, second]) == [second, first]


def test_load_movie_years_orders_titles(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("Stargate\t1994\nCaptain America\t2011\r\nBoys Night Out\t1962\n")
    movies = load_movie_years(path)
    assert list(movies) == sorted(movies)
    assert movies["Captain America"] == 2011


def test_load_movie_years_last_duplicate_wins(tmp_path):
    path = tmp_path / "values.txt"
    path.write_text("Stargate\t1994\nStargate\t1995\n")
    assert load_movie_years(path) == {"Stargate": 1995}


@pytest.mark.parametrize("content", ["Stargate 1994\n", "Stargate\tnineteen\n", "Stargate\t\n"])
def test_load_movie_years_rejects_bad_lines(tmp_path, content):
    path = tmp_path / "values.txt"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_movie_years(path)


def test_sorted_by_year():
    pairs = sorted_by_year({"b": 2000, "a": 2000, "c": 1990})
    assert pairs == [("c", 1990), ("a", 2000), ("b", 2000)]


def test_main_sort_output(capsys):
    assert main_sort([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(default_movies())
    assert lines[0] == 'DVD { title: "Captain America", year: 2011 }'


def test_main_tree_output(tmp_path, capsys):
    path = tmp_path / "values.txt"
    path.write_text("Stargate\t1994\nCaptain America\t2011\nBoys Night Out\t1962\n")
    assert main_tree([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "We have 3 movies"
    assert lines[1] == "2011"
    assert lines[2] == "Boys Night Out : 1962"
    assert lines[-1] == '[("Boys Night Out", 1962), ("Stargate", 1994), ("Captain America", 2011)]'


def test_main_tree_missing_movies(tmp_path, capsys):
    path = tmp_path / "values.txt"
    path.write_text("Stargate\t1994\n")
    main_tree([str(path)])
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "Unable to find that movie"
    assert lines[2] == "Unable to find that movie"