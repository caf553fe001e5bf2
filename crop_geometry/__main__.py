from crop_geometry.app import main

main()
