import os
from types import SimpleNamespace

from labkit.sysdetails import disk_lines, main, memory_lines, process_lines


def test_memory_lines(mocker):
    mocker.patch("psutil.virtual_memory", return_value=SimpleNamespace(total=4096, used=2048))
    mocker.patch("psutil.swap_memory", return_value=SimpleNamespace(total=1024, used=0))
    assert memory_lines() == [
        "System memory:\t 4 KB",
        "Used memory:\t 2 KB",
        "Total swap:\t 1 KB",
        "Used swap:\t 0 KB",
    ]


def test_disk_lines(mocker):
    part = SimpleNamespace(device="/dev/x", mountpoint="/", fstype="ext4")
    mocker.patch("psutil.disk_partitions", return_value=[part])
    (line,) = disk_lines()
    assert "'/dev/x'" in line and "'ext4'" in line


def test_process_lines(mocker):
    proc = SimpleNamespace(info={"pid": 7, "name": "init", "status": "sleeping"})
    mocker.patch("psutil.process_iter", return_value=[proc])
    assert process_lines() == ["7:init, status: sleeping"]


def test_main_unknown(capsys):
    assert main(["other"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[1] == f"The current process id is {os.getpid()}"
    assert out[2] == "You haven't provided an acceptable parameter"