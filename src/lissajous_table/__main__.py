from lissajous_table.cli import main

main()
