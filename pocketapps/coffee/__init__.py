"""Coffee shop: coffees, orders, menu, shop and the interactive shop manager."""