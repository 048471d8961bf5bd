from route_directions.server import main

main()
