"""Analytics package - receives web-vitals beacons from the site."""
