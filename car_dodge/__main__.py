from car_dodge.play import main

main()
