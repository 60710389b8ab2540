STOREFRONT_HTML = """
<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8"/>
    <meta name="viewport" content="width=device-width, initial-scale=1"/>
    <title>AI Commerce</title>
    <style>
      body { margin: 0; font-family: system-ui, sans-serif; background: #f8fafc; color: #111827; }
      .hidden { display: none !important; }
      #login-view { min-height: 100vh; display: flex; align-items: center; justify-content: center;
                    background: linear-gradient(135deg, #0f172a, #581c87, #0f172a); }
      .card { background: rgba(255,255,255,0.1); border-radius: 16px; padding: 40px; width: 360px;
              text-align: center; color: #fff; }
      .btn { border: 0; border-radius: 10px; padding: 12px 20px; cursor: pointer; font-weight: 600; }
      .btn-google { width: 100%; background: #fff; color: #111827; }
      .btn-primary { background: linear-gradient(90deg, #8b5cf6, #4f46e5); color: #fff; }
      .error { color: #fca5a5; min-height: 1.2em; margin-top: 12px; }
      nav { position: sticky; top: 0; display: flex; justify-content: space-between; align-items: center;
            padding: 12px 32px; background: rgba(255,255,255,0.9); border-bottom: 1px solid #e5e7eb; }
      .avatar { width: 40px; height: 40px; border-radius: 50%; display: inline-flex; align-items: center;
                justify-content: center; background: #6d28d9; color: #fff; font-weight: 600; }
      main { max-width: 1200px; margin: 0 auto; padding: 32px; }
      #search-form { display: flex; gap: 8px; margin: 24px 0; }
      #search-input { flex: 1; padding: 12px; border: 1px solid #d1d5db; border-radius: 10px; }
      #product-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); gap: 24px; }
      .product { background: #fff; border-radius: 16px; overflow: hidden; box-shadow: 0 1px 3px rgba(0,0,0,0.1); }
      .product img { width: 100%; height: 200px; object-fit: cover; }
      .product .body { padding: 16px; }
      .category { font-size: 12px; color: #6d28d9; text-transform: uppercase; }
      .price { font-weight: 700; font-size: 18px; }
      .score { font-size: 12px; color: #6b7280; }
    </style>
  </head>
  <body>
    <div id="loading-view"><p style="text-align:center;margin-top:40vh">Loading your experience...</p></div>

    <div id="login-view" class="hidden">
      <div class="card">
        <h1>AI Commerce</h1>
        <p>Discover products with semantic search.</p>
        <button id="google-login" class="btn btn-google">Continue with Google</button>
        <div id="login-error" class="error"></div>
      </div>
    </div>

    <div id="products-view" class="hidden">
      <nav>
        <strong>AI Commerce</strong>
        <div>
          <span>Welcome back, <strong id="user-name"></strong></span>
          <span id="user-avatar" class="avatar"></span>
          <button id="logout" class="btn">Logout</button>
        </div>
      </nav>
      <main>
        <form id="search-form">
          <input id="search-input" type="text" placeholder="Search for products, e.g. 'gear for my morning run'"/>
          <button type="submit" class="btn btn-primary" id="search-button">Search</button>
          <button type="button" class="btn hidden" id="clear-search">Clear</button>
        </form>
        <p id="result-info"></p>
        <div id="product-grid"></div>
      </main>
    </div>

    <script>
      const API = "/api";
      let allProducts = [];

      function show(view) {
        for (const id of ["loading-view", "login-view", "products-view"]) {
          document.getElementById(id).classList.toggle("hidden", id !== view);
        }
      }

      function renderProducts(products, searched) {
        const grid = document.getElementById("product-grid");
        grid.innerHTML = "";
        const info = document.getElementById("result-info");
        if (searched && products.length === 0) {
          info.textContent = "No products found. Try a different search.";
          return;
        }
        info.textContent = searched ? `${products.length} result(s)` : "";
        for (const p of products) {
          const card = document.createElement("div");
          card.className = "product";
          const score = p.score !== undefined ? `<div class="score">match ${(p.score * 100).toFixed(1)}%</div>` : "";
          card.innerHTML = `
            <img alt=""/>
            <div class="body">
              <div class="category"></div>
              <h3></h3>
              <p></p>
              <div class="price">$${Number(p.price).toFixed(2)}</div>
              ${score}
            </div>`;
          card.querySelector(".category").textContent = p.category;
          card.querySelector("h3").textContent = p.name;
          card.querySelector("p").textContent = p.description;
          card.querySelector("img").src = p.imageUrl;
          grid.appendChild(card);
        }
      }

      async function loadProducts() {
        try {
          const response = await fetch(`${API}/products`);
          if (response.ok) {
            allProducts = await response.json();
            renderProducts(allProducts, false);
          }
        } catch (error) {
          console.error("Failed to fetch products:", error);
        }
      }

      function enterStore(user) {
        document.getElementById("user-name").textContent = user.name;
        document.getElementById("user-avatar").textContent = user.avatar;
        show("products-view");
        loadProducts();
      }

      async function verifyToken(token) {
        try {
          const response = await fetch(`${API}/auth/verify`, {
            headers: { Authorization: `Bearer ${token}` },
          });
          if (response.ok) {
            const data = await response.json();
            enterStore(data.user);
            return;
          }
          localStorage.removeItem("token");
        } catch (error) {
          console.error("Token verification failed:", error);
          localStorage.removeItem("token");
        }
        show("login-view");
      }

      document.getElementById("google-login").addEventListener("click", async () => {
        const errorBox = document.getElementById("login-error");
        errorBox.textContent = "";
        try {
          const response = await fetch(`${API}/auth/google`, {
            method: "POST",
            headers: { "Content-Type": "application/json" },
            body: JSON.stringify({ token: "mock-google-token" }),
          });
          if (response.ok) {
            const data = await response.json();
            localStorage.setItem("token", data.token);
            enterStore(data.user);
          } else {
            errorBox.textContent = "Login failed. Please try again.";
          }
        } catch (error) {
          errorBox.textContent = "Network error. Please check your connection.";
        }
      });

      document.getElementById("logout").addEventListener("click", () => {
        localStorage.removeItem("token");
        show("login-view");
      });

      document.getElementById("search-form").addEventListener("submit", async (event) => {
        event.preventDefault();
        const query = document.getElementById("search-input").value;
        const clear = document.getElementById("clear-search");
        if (!query.trim()) {
          clear.classList.add("hidden");
          renderProducts(allProducts, false);
          return;
        }
        clear.classList.remove("hidden");
        const button = document.getElementById("search-button");
        button.disabled = true;
        try {
          const response = await fetch(`${API}/search`, {
            method: "POST",
            headers: { "Content-Type": "application/json" },
            body: JSON.stringify({ query }),
          });
          if (response.ok) {
            const data = await response.json();
            renderProducts(data.products || [], true);
          }
        } catch (error) {
          console.error("Search failed:", error);
        } finally {
          button.disabled = false;
        }
      });

      document.getElementById("clear-search").addEventListener("click", () => {
        document.getElementById("search-input").value = "";
        document.getElementById("clear-search").classList.add("hidden");
        renderProducts(allProducts, false);
      });

      const token = localStorage.getItem("token");
      if (token) {
        verifyToken(token);
      } else {
        show("login-view");
      }
    </script>
  </body>
</html>
"""
